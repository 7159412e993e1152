"""
Pixel Palette
Single-image filter, adjustment and rotate/flip editor
"""

import sys


def run_gui():
    """Launch the GUI application."""
    from PySide6.QtWidgets import QApplication
    from PySide6.QtCore import Qt
    from gui.main_window import MainWindow, APP_NAME, APP_VERSION

    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )

    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setApplicationVersion(APP_VERSION)
    app.setOrganizationName("PixelPalette")
    app.setStyle("Fusion")

    window = MainWindow()
    window.show()
    sys.exit(app.exec())


def run_cli():
    """Render one image with a filter preset and write the result."""
    from engines.filter_catalog import FILTER_IDS
    from engines.session import EditorSession, SelectFilter, Download
    from models.errors import EditorError
    from utils.image_io import load_image, save_bytes

    args = sys.argv[2:]

    if not args or args[0] == '--help':
        print("Usage: python main.py --cli <image_path> [filter] [output_path]")
        print(f"Filters: {', '.join(FILTER_IDS)}")
        sys.exit(0)

    image_path = args[0]
    filter_id = args[1] if len(args) > 1 else 'none'

    try:
        session = EditorSession()
        print(f"Loading: {image_path}")
        session.load(load_image(image_path))
        result = session.dispatch(SelectFilter(filter_id))
        exported = session.dispatch(Download())
    except (EditorError, OSError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    output_path = args[2] if len(args) > 2 else exported.filename

    print(f"Image:  {result.width}x{result.height}")
    print(f"Filter: {result.filter_id}")
    print(f"Time:   {result.render_time_ms:.2f} ms")

    save_bytes(exported.data, output_path)
    print(f"\nSaved: {output_path}")


def main():
    if len(sys.argv) > 1 and sys.argv[1] == '--cli':
        run_cli()
    else:
        run_gui()


if __name__ == '__main__':
    main()
