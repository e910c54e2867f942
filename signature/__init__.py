"""
Signature capture.

Freehand signature surface driven by mouse or touch input, producing PNG
data-URL artifacts, plus a Tk widget hosting it.
"""
