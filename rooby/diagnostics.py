"""
Everything about saying what went wrong.

Run-time errors are values, not exceptions: the constructors here build
them, one per kind of failure, all through the one `new_error` so they
look alike. The Report decides what happens to an error that survives
all the way to the top, and narrates evaluation when asked to.
"""
import sys
from typing import Optional
from .tree_walker.types import Error, RoobyValue

UNKNOWN_OPERATOR = "UnknownOperator"
TYPE_MISMATCH = "TypeMismatch"
UNDEFINED_VARIABLE_OR_METHOD = "UndefinedVariableOrMethod"
UNDEFINED_METHOD = "UndefinedMethod"
CONSTANT_NOT_FOUND = "ConstantNotFound"
INSTANCE_VARIABLE_NOT_FOUND = "InstanceVariableNotFound"
ZERO_DIVISION = "ZeroDivision"
WRONG_ARGUMENT_COUNT = "WrongArgumentCount"
INSTANCE_VARIABLE_NOT_ASSIGNABLE = "InstanceVariableNotAssignable"

def new_error(reason:str, pattern:str, *args) -> Error:
	return Error(reason, pattern % args)

def unknown_operator(op:str, kind:str, other_kind:Optional[str]=None) -> Error:
	if other_kind is None:
		return new_error(UNKNOWN_OPERATOR, "unknown operator: %s%s", op, kind)
	return new_error(UNKNOWN_OPERATOR, "unknown operator: %s %s %s", kind, op, other_kind)

def type_mismatch(left_kind:str, op:str, right_kind:str) -> Error:
	return new_error(TYPE_MISMATCH, "type mismatch: %s %s %s", left_kind, op, right_kind)

def undefined_variable_or_method(name:str, receiver:RoobyValue) -> Error:
	pattern = "undefined local variable or method `%s' for %s"
	return new_error(UNDEFINED_VARIABLE_OR_METHOD, pattern, name, receiver.inspect())

def undefined_method(name:str, receiver:RoobyValue) -> Error:
	return new_error(UNDEFINED_METHOD, "undefined method `%s' for %s", name, receiver.inspect())

def constant_not_found(name:str, receiver:RoobyValue) -> Error:
	return new_error(CONSTANT_NOT_FOUND, "constant %s not found in: %s", name, receiver.inspect())

def instance_variable_not_found(name:str, receiver:RoobyValue) -> Error:
	pattern = "instance variable @%s not found in: %s"
	return new_error(INSTANCE_VARIABLE_NOT_FOUND, pattern, name, receiver.inspect())

def zero_division() -> Error:
	return new_error(ZERO_DIVISION, "divided by 0")

def wrong_argument_count(name:str, given:int, expected:int) -> Error:
	pattern = "wrong number of arguments for `%s' (given %d, expected %d)"
	return new_error(WRONG_ARGUMENT_COUNT, pattern, name, given, expected)

def instance_variable_not_assignable(name:str, receiver:RoobyValue) -> Error:
	pattern = "can't set instance variable @%s on: %s"
	return new_error(INSTANCE_VARIABLE_NOT_ASSIGNABLE, pattern, name, receiver.inspect())

###############################################################################

class TooManyIssues(Exception):
	pass

class Report:
	""" Collects the errors that reach the top, and talks about evaluation if verbose. """
	_issues : list[Error]

	def __init__(self, *, verbose:int=0, max_issues=3):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._max_issues = max_issues

	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)

	@property
	def issues(self) -> tuple[Error, ...]: return tuple(self._issues)

	def issue(self, error:Error):
		assert isinstance(error, Error), type(error)
		self._issues.append(error)
		if len(self._issues) == self._max_issues:
			raise TooManyIssues(self)

	def reset(self):
		self._issues.clear()

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		if self._issues:
			print("*"*60, file=sys.stderr)
		for error in self._issues:
			print("  %s: %s" % (error.reason, error.message), file=sys.stderr)

	def assert_no_issues(self, message):
		""" Does what it says on the tin """
		if self._issues:
			self.complain_to_console()
			raise AssertionError(message)
