from framework.gui.main_window import run

if __name__ == "__main__":
    run()
