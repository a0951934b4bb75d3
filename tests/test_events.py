import pytest

from guicalc.events import Digit, Op


@pytest.mark.parametrize("value", [-1, 10, True, "5", 2.0])
def test_digit_rejects_non_digits(value):
	with pytest.raises(ValueError):
		Digit(value)


def test_digit_char():
	assert Digit(4).char == "4"


@pytest.mark.parametrize(
	"symbol, op",
	[("+", Op.ADD), ("-", Op.SUBTRACT), ("−", Op.SUBTRACT), ("*", Op.MULTIPLY), ("×", Op.MULTIPLY), ("/", Op.DIVIDE), ("÷", Op.DIVIDE)],
)
def test_op_from_symbol(symbol, op):
	assert Op.from_symbol(symbol) is op


def test_op_from_unknown_symbol():
	with pytest.raises(ValueError):
		Op.from_symbol("^")
