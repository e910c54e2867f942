"""
Training feature.

Companies, training modules, access links with QR codes, attendance records
signed through the capture surface, and the PDF documents built from them.
"""
