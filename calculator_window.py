# calculator_window.py
# Python 3.x, PyQt5
# PEP 8 준수, 문자열은 기본적으로 ' ' 사용

import argparse
import logging
import sys
from typing import Optional

from PyQt5.QtCore import Qt
from PyQt5.QtGui import QColor, QFont
from PyQt5.QtWidgets import (
    QApplication,
    QWidget,
    QGridLayout,
    QVBoxLayout,
    QPushButton,
    QLineEdit,
)

# 엔진은 GUI 없이 동작하는 calculator 모듈을 재사용
from calculator import Calculator, Symbol

WINDOW_SIZE = (360, 480)
DISPLAY_FONT_SIZE = 32
BUTTON_FONT_SIZE = 22
FONT_FAMILY = 'SansSerif'

BUTTON_ROWS = [
    ['C', '⌫', '±', '÷'],
    ['7', '8', '9', '×'],
    ['4', '5', '6', '-'],
    ['1', '2', '3', '+'],
    ['0', '.', '='],
]

CLEAR_COLOR = QColor(Qt.red).darker()
OPERATOR_COLOR = QColor(Qt.blue).darker()

# 키보드 → 입력 기호(숫자 키는 text로 처리)
KEY_SYMBOLS = {
    Qt.Key_Enter: Symbol.EQUALS,
    Qt.Key_Return: Symbol.EQUALS,
    Qt.Key_Period: Symbol.DOT,
    Qt.Key_Plus: Symbol.ADD,
    Qt.Key_Minus: Symbol.SUBTRACT,
    Qt.Key_Asterisk: Symbol.MULTIPLY,
    Qt.Key_Slash: Symbol.DIVIDE,
    Qt.Key_Backspace: Symbol.BACKSPACE,
    Qt.Key_Escape: Symbol.CLEAR,
}

logger = logging.getLogger('calculator')


def setup_logger(log_path=None, level=logging.INFO):
    """콘솔과 (선택) 파일(UTF-8)로 로그를 남기는 로거를 설정한다."""
    if logger.handlers:
        return logger

    logger.setLevel(level)
    formatter = logging.Formatter(
        fmt='%(asctime)s %(levelname)s %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # 콘솔
    sh = logging.StreamHandler(sys.stdout)
    sh.setLevel(level)
    sh.setFormatter(formatter)
    logger.addHandler(sh)

    # 파일(UTF-8)
    if log_path:
        fh = logging.FileHandler(log_path, mode='a', encoding='utf-8')
        fh.setLevel(level)
        fh.setFormatter(formatter)
        logger.addHandler(fh)

    return logger


def symbol_for_key(key: int, text: str = '', modifiers=Qt.NoModifier) -> Optional[Symbol]:
    """눌린 키를 입력 기호로 변환, 해당 없으면 None"""
    # Ctrl/Alt 조합은 단축키이므로 입력으로 보지 않음
    if int(modifiers) & int(Qt.ControlModifier | Qt.AltModifier):
        return None
    symbol = Symbol.from_label(text)
    if symbol is not None and symbol.is_digit:
        return symbol
    if Qt.Key_0 <= key <= Qt.Key_9:
        return Symbol(chr(key))
    return KEY_SYMBOLS.get(key)


class CalculatorWindow(QWidget):
    """PyQt5 UI: 버튼/키보드 → Calculator 엔진 연결"""

    def __init__(self, engine: Optional[Calculator] = None) -> None:
        super().__init__()
        self.engine = engine if engine is not None else Calculator()
        self.buttons = {}
        self._build_ui()

    def _build_ui(self) -> None:
        self.setWindowTitle('Calculator')
        root = QVBoxLayout()
        root.setContentsMargins(8, 8, 8, 8)
        root.setSpacing(8)
        self.setLayout(root)

        # 표시부
        self.display = QLineEdit()
        self.display.setReadOnly(True)
        self.display.setFocusPolicy(Qt.NoFocus)
        self.display.setAlignment(Qt.AlignRight)
        self.display.setFont(QFont(FONT_FAMILY, DISPLAY_FONT_SIZE, QFont.Bold))
        self.display.setText(self.engine.display_text())
        root.addWidget(self.display)

        grid = QGridLayout()
        grid.setSpacing(6)
        root.addLayout(grid)

        for r, row in enumerate(BUTTON_ROWS):
            c = 0
            for label in row:
                btn = QPushButton(label)
                btn.setFont(QFont(FONT_FAMILY, BUTTON_FONT_SIZE))
                btn.setMinimumHeight(56)
                btn.setCursor(Qt.PointingHandCursor)
                # 키 입력이 항상 창으로 가도록 버튼은 포커스를 받지 않음
                btn.setFocusPolicy(Qt.NoFocus)
                self._style_button(btn, label)
                # clicked는 checked(bool) 인자를 내보내므로 첫 인자를 흡수하도록 작성
                btn.clicked.connect(lambda checked=False, ch=label: self.on_button(ch))
                self.buttons[label] = btn

                # 0 버튼은 두 칸 차지
                span = 2 if label == '0' else 1
                grid.addWidget(btn, r, c, 1, span)
                c += span

        self.resize(*WINDOW_SIZE)
        self.setFocusPolicy(Qt.StrongFocus)

    def _style_button(self, btn: QPushButton, label: str) -> None:
        symbol = Symbol.from_label(label)
        if symbol is Symbol.CLEAR:
            color = CLEAR_COLOR
        elif symbol is Symbol.EQUALS or (symbol is not None and symbol.is_operator):
            color = OPERATOR_COLOR
        else:
            return
        btn.setStyleSheet('color: {};'.format(color.name()))

    def center_on_screen(self) -> None:
        screen = QApplication.primaryScreen()
        if screen is None:
            return
        frame = self.frameGeometry()
        frame.moveCenter(screen.availableGeometry().center())
        self.move(frame.topLeft())

    def on_button(self, ch: str) -> None:
        symbol = Symbol.from_label(ch)
        if symbol is None:
            return
        self._dispatch(symbol)

    def keyPressEvent(self, event) -> None:
        symbol = symbol_for_key(event.key(), event.text(), event.modifiers())
        if symbol is None:
            super().keyPressEvent(event)
            return
        self._dispatch(symbol)

    def _dispatch(self, symbol: Symbol) -> None:
        self.display.setText(self.engine.handle_input(symbol))


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description='사칙연산 데스크톱 계산기(마우스 클릭 및 키보드 입력 지원)'
    )
    parser.add_argument('--log', default=None,
                        help='로그를 추가로 기록할 파일 경로(기본값: 콘솔만)')
    parser.add_argument('--debug', action='store_true',
                        help='입력 기호와 표시값을 DEBUG 레벨로 기록')
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    setup_logger(args.log, logging.DEBUG if args.debug else logging.INFO)

    app = QApplication(sys.argv[:1])
    w = CalculatorWindow()
    w.center_on_screen()
    w.show()
    logger.info('계산기 시작')
    sys.exit(app.exec())


if __name__ == '__main__':
    main()
