"""
This module aims to express an interface agreement
between the evaluator and various kinds of data.
"""

from abc import ABC, abstractmethod

INTEGER = "INTEGER"
BOOLEAN = "BOOLEAN"
STRING = "STRING"
NULL = "NULL"
ERROR = "ERROR"
CLASS = "CLASS"
OBJECT = "OBJECT"

class RoobyValue(ABC):
	""" Root for everything the evaluator can hand back as the value of an expression. """
	@abstractmethod
	def kind(self) -> str: pass

	@abstractmethod
	def inspect(self) -> str: pass

	def __str__(self): return self.inspect()
	def __repr__(self): return "<%s %s>" % (self.kind(), self.inspect())

class Error(RoobyValue):
	"""
	Run-time failure, as an ordinary value.
	The reason names the kind of failure; the message is for people.
	"""
	def __init__(self, reason:str, message:str):
		self.reason, self.message = reason, message
	def kind(self): return ERROR
	def inspect(self): return "ERROR: " + self.message

def is_error(it) -> bool:
	return isinstance(it, Error)

###############################################################################

class ReturnCarrier:
	""" What a method invocation yields. Callers must unwrap it before use. """
	__slots__ = ("value",)
	def __init__(self, value:RoobyValue):
		assert isinstance(value, RoobyValue), type(value)
		self.value = value
	def __repr__(self): return "%s(%r)" % (type(self).__name__, self.value)

class Plain(ReturnCarrier):
	""" The method body ran off its end; the value is that of its last statement. """

class EarlyReturn(ReturnCarrier):
	""" A `return` statement fired somewhere inside the body. """

def unwrap_return_value(carrier:ReturnCarrier) -> RoobyValue:
	assert isinstance(carrier, ReturnCarrier), type(carrier)
	return carrier.value

def is_abrupt(it) -> bool:
	""" True for the things that must stop a block in its tracks. """
	return isinstance(it, (Error, EarlyReturn))
