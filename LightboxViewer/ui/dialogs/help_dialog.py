"""Help dialog showing keyboard shortcuts and gestures."""

from PySide6.QtWidgets import QDialog, QTextEdit, QVBoxLayout


class HelpDialog(QDialog):
    """Dialog showing keyboard shortcuts and usage help.

    Displays a read-only text widget with all available keyboard
    shortcuts and gestures in Japanese.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle("ヘルプ / キーボードショートカット")
        self.resize(480, 400)

        text = QTextEdit(self)
        text.setReadOnly(True)

        content = (
            "LightboxViewer ヘルプ\n"
            "================================\n\n"
            "[キーボード]\n"
            "  Esc        : 閉じる\n"
            "  ← / →      : 前 / 次 の画像 (端で先頭・末尾に戻る)\n"
            "  + / -      : ズームイン / ズームアウト\n"
            "  0          : ズームリセット\n"
            "  F1         : このヘルプ\n\n"
            "[マウス / ジェスチャー]\n"
            "  ピンチ / ホイール : ズーム (100% 〜 300%)\n"
            "  ダブルクリック     : 100% / 200% 切り替え\n"
            "  ドラッグ           : 画像切り替え (ズーム中は移動)\n"
            "  下部のドット       : 画像を選択\n"
        )
        text.setPlainText(content)

        layout = QVBoxLayout(self)
        layout.addWidget(text)
