# calculator.py
# Python 3.x, GUI 없이 import 가능한 계산기 엔진
# PEP 8 준수, 문자열은 기본적으로 ' ' 사용

import logging
import math
from decimal import Decimal, ROUND_HALF_EVEN, localcontext
from enum import Enum
from typing import Optional

logger = logging.getLogger('calculator')

ERROR_TEXT = 'Error'
DIV_ZERO_TEXT = 'Cannot divide by 0'
MAX_FRACTION_DIGITS = 10  # 결과 표시 최대 소수 자릿수

# float 최댓값(약 1.8e308)의 정수부 전체 + 소수부를 담을 수 있는 정밀도
_FORMAT_PREC = 330


class Symbol(str, Enum):
    """입력 기호 집합(버튼 라벨과 키 입력이 모두 이 값으로 정규화됨)"""

    ZERO = '0'
    ONE = '1'
    TWO = '2'
    THREE = '3'
    FOUR = '4'
    FIVE = '5'
    SIX = '6'
    SEVEN = '7'
    EIGHT = '8'
    NINE = '9'
    DOT = '.'
    CLEAR = 'C'
    BACKSPACE = '⌫'
    SIGN = '±'
    ADD = '+'
    SUBTRACT = '-'
    MULTIPLY = '×'
    DIVIDE = '÷'
    EQUALS = '='

    @classmethod
    def from_label(cls, text: str) -> Optional['Symbol']:
        try:
            return cls(text)
        except ValueError:
            return None

    @property
    def is_digit(self) -> bool:
        return self.value.isdigit()

    @property
    def is_operator(self) -> bool:
        return self in OPERATORS


OPERATORS = frozenset({Symbol.ADD, Symbol.SUBTRACT, Symbol.MULTIPLY, Symbol.DIVIDE})


def format_result(value: float) -> str:
    """'0.##########' 형식: 소수 10자리까지, 뒤쪽 0과 소수점 제거, 지수 표기 없음"""
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return '-∞' if value < 0 else '∞'

    # Decimal(float)는 이진 double 값을 그대로(정확히) 표현한다
    with localcontext() as ctx:
        ctx.prec = _FORMAT_PREC
        quantum = Decimal(1).scaleb(-MAX_FRACTION_DIGITS)
        d = Decimal(value).quantize(quantum, rounding=ROUND_HALF_EVEN)
    s = format(d, 'f')
    if '.' in s:
        s = s.rstrip('0').rstrip('.')
    return s


class Calculator:
    """연산 엔진: 표시 버퍼 + 대기 연산자 하나만 관리하는 입력 상태 기계"""

    def __init__(self) -> None:
        self.reset()

    # 필수 API
    def add(self, a: float, b: float) -> float:
        return a + b

    def subtract(self, a: float, b: float) -> float:
        return a - b

    def multiply(self, a: float, b: float) -> float:
        return a * b

    def divide(self, a: float, b: float) -> float:
        # b == 0(-0.0 포함)이면 ZeroDivisionError
        return a / b

    def handle_input(self, symbol: Symbol) -> str:
        """기호 하나를 처리하고 새 표시 문자열을 돌려준다"""
        symbol = Symbol(symbol)
        logger.debug('입력: %s', symbol.value)

        if symbol.is_digit:
            self.input_digit(symbol.value)
        elif symbol is Symbol.DOT:
            self.input_dot()
        elif symbol is Symbol.CLEAR:
            self.reset()
        elif symbol is Symbol.BACKSPACE:
            self.backspace()
        elif symbol is Symbol.SIGN:
            self.negative_positive()
        elif symbol.is_operator:
            self.set_operator(symbol)
        elif symbol is Symbol.EQUALS:
            self.equal()
        else:
            raise ValueError('unhandled symbol: {!r}'.format(symbol))

        logger.debug('표시: %s', self.display)
        return self.display

    def reset(self) -> None:
        self.display = '0'  # 표시 중인 문자열(입력 중인 숫자)
        self.first_operand = 0.0  # 연산자를 누른 시점의 값
        self.operator = ''  # 대기 연산자, ''이면 없음
        self.start_new_number = True  # 다음 숫자 입력이 새 숫자를 시작하는지 여부

    def input_digit(self, d: str) -> None:
        if self.start_new_number:
            # '0'이어도 편집 중인 숫자로 간주
            self.display = d
            self.start_new_number = False
        elif self.display == '0':
            self.display = d
        else:
            self.display += d

    def input_dot(self) -> None:
        if self.start_new_number:
            self.display = '0.'
            self.start_new_number = False
            return
        if '.' not in self.display:
            self.display += '.'

    def backspace(self) -> None:
        if self.start_new_number:
            return
        if len(self.display) <= 1:
            self.display = '0'
            self.start_new_number = True
        else:
            self.display = self.display[:-1]

    def negative_positive(self) -> None:
        if self.display == '0':
            return
        if self.display.startswith('-'):
            self.display = self.display[1:]
        else:
            self.display = '-' + self.display

    def set_operator(self, op: Symbol) -> None:
        # 연산자를 연달아 누르면 계산 없이 연산자만 교체
        try:
            self.first_operand = float(self.display)
        except ValueError:
            self._set_error()
            return
        self.operator = Symbol(op)
        self.start_new_number = True

    def equal(self) -> None:
        if not self.operator:
            return
        try:
            second = float(self.display)
        except ValueError:
            self._set_error()
            return

        try:
            result = self._apply_op(self.first_operand, second, self.operator)
        except ZeroDivisionError:
            logger.info('0으로 나누기: %s ÷ %s', self.first_operand, second)
            self.display = DIV_ZERO_TEXT
        else:
            self.display = format_result(result)

        self.operator = ''
        self.start_new_number = True

    # 표시 문자열
    def display_text(self) -> str:
        return self.display

    # 내부 유틸
    def _apply_op(self, a: float, b: float, op: Symbol) -> float:
        if op is Symbol.ADD:
            return self.add(a, b)
        if op is Symbol.SUBTRACT:
            return self.subtract(a, b)
        if op is Symbol.MULTIPLY:
            return self.multiply(a, b)
        if op is Symbol.DIVIDE:
            return self.divide(a, b)
        raise ValueError('not an operator: {!r}'.format(op))

    def _set_error(self) -> None:
        logger.warning('숫자로 해석할 수 없음: %r', self.display)
        self.display = ERROR_TEXT
        self.operator = ''
        self.start_new_number = True
