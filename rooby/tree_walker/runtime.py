"""
Operator semantics over primitive values, and the two truthiness rules.

Operands arrive already evaluated and already checked for errors.
Infix operators dispatch on the pair of operand kinds; only the three
homogeneous pairs mean anything, and there is no coercion between kinds.
"""
import operator
from .. import primitive
from ..diagnostics import unknown_operator, type_mismatch, zero_division
from .types import RoobyValue, INTEGER, BOOLEAN, STRING

def _truncating_div(a:int, b:int) -> int:
	# Python's // floors; this language truncates toward zero.
	quotient = abs(a) // abs(b)
	return -quotient if (a < 0) != (b < 0) else quotient

INTEGER_INFIX = {
	"+"  : operator.add,
	"-"  : operator.sub,
	"*"  : operator.mul,
	"/"  : _truncating_div,
	">"  : operator.gt,
	"<"  : operator.lt,
	"==" : operator.eq,
	"!=" : operator.ne,
}
BOOLEAN_INFIX = {
	"==" : operator.eq,
	"!=" : operator.ne,
}
STRING_INFIX = {
	"+"  : operator.add,
	">"  : operator.gt,
	"<"  : operator.lt,
	"==" : operator.eq,
	"!=" : operator.ne,
}
INFIX = {
	(INTEGER, INTEGER): INTEGER_INFIX,
	(BOOLEAN, BOOLEAN): BOOLEAN_INFIX,
	(STRING, STRING): STRING_INFIX,
}

def _box(result) -> RoobyValue:
	# bool before int: True is an int, as far as Python cares.
	if isinstance(result, bool): return primitive.native_bool(result)
	if isinstance(result, int): return primitive.integer(result)
	assert isinstance(result, str), type(result)
	return primitive.string(result)

def eval_infix(left:RoobyValue, op:str, right:RoobyValue) -> RoobyValue:
	try: family = INFIX[left.kind(), right.kind()]
	except KeyError: return type_mismatch(left.kind(), op, right.kind())
	try: fn = family[op]
	except KeyError: return unknown_operator(op, left.kind(), right.kind())
	try: result = fn(left.value, right.value)
	except ZeroDivisionError: return zero_division()
	return _box(result)

###############################################################################

def is_truthy(value:RoobyValue) -> bool:
	""" The rule behind `!`: only false and null are false. """
	return value is not primitive.FALSE and value is not primitive.NULL

def takes_branch(condition:RoobyValue) -> bool:
	"""
	The rule behind `if`: every integer (zero too) selects the consequence,
	and otherwise only true does. Deliberately not the same as is_truthy.
	"""
	return condition.kind() == INTEGER or condition is primitive.TRUE

def _bang(operand:RoobyValue) -> RoobyValue:
	return primitive.native_bool(not is_truthy(operand))

def _minus(operand:RoobyValue) -> RoobyValue:
	if operand.kind() != INTEGER:
		return unknown_operator("-", operand.kind())
	return primitive.integer(-operand.value)

PREFIX = {
	"!" : _bang,
	"-" : _minus,
}

def eval_prefix(op:str, operand:RoobyValue) -> RoobyValue:
	try: fn = PREFIX[op]
	except KeyError: return unknown_operator(op, operand.kind())
	return fn(operand)
