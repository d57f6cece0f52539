import os

import pytest

# 디스플레이 없는 환경에서도 위젯을 만들 수 있도록
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')

from calculator import Calculator  # noqa: E402


@pytest.fixture
def calc():
    return Calculator()


@pytest.fixture
def press(calc):
    """기호 문자열을 순서대로 입력하고 마지막 표시값을 돌려준다"""
    def _press(*labels):
        text = calc.display_text()
        for label in labels:
            text = calc.handle_input(label)
        return text
    return _press
