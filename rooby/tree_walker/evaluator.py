"""
The tree-walker proper: one visit method per kind of syntax node.

Errors are values. Wherever a sub-result feeds into something else,
an error (or an early return, inside a method body) goes straight back
up instead. Nothing here ever turns an error into some default value.

Bare names are where the object model shows through. A bound variable
wins; failing that, the name is a zero-argument call on self, and self
decides which method table gets searched. That decision lives in
`dispatch` and nowhere else.
"""
from typing import Optional, Sequence
from boozetools.support.foundation import Visitor
from .. import syntax, primitive
from ..ontology import Phrase
from ..diagnostics import (
	Report, undefined_variable_or_method, undefined_method,
	constant_not_found, instance_variable_not_found, wrong_argument_count,
	instance_variable_not_assignable,
)
from .types import (
	RoobyValue, ReturnCarrier, Plain, EarlyReturn,
	is_abrupt, unwrap_return_value,
)
from .values import Scope, Method, Receiver, RClass, RObject
from .runtime import eval_prefix, eval_infix, takes_branch

# Node types already seen to have a visit method.
_KNOWN_NODES = set()

class Evaluator(Visitor):
	def __init__(self, report:Optional[Report]=None):
		self._report = report or Report(verbose=0)

	def evaluate(self, node:Phrase, scope:Scope):
		"""
		Generally produces a RoobyValue, which may be an Error.
		Statements inside a method body may also produce an EarlyReturn.
		"""
		assert isinstance(scope, Scope), type(scope)
		if type(node) not in _KNOWN_NODES:
			if not hasattr(self, "visit_" + type(node).__name__):
				raise NotImplementedError(type(node), node)
			_KNOWN_NODES.add(type(node))
		return self.visit(node, scope)

	# Literals and such

	@staticmethod
	def visit_IntegerLiteral(node:syntax.IntegerLiteral, scope:Scope):
		return primitive.integer(node.value)

	@staticmethod
	def visit_StringLiteral(node:syntax.StringLiteral, scope:Scope):
		return primitive.string(node.value)

	@staticmethod
	def visit_BooleanLiteral(node:syntax.BooleanLiteral, scope:Scope):
		return primitive.native_bool(node.value)

	@staticmethod
	def visit_NullLiteral(node:syntax.NullLiteral, scope:Scope):
		return primitive.NULL

	@staticmethod
	def visit_SelfExpression(node:syntax.SelfExpression, scope:Scope):
		return scope.receiver

	# Operators

	def visit_PrefixExpression(self, node:syntax.PrefixExpression, scope:Scope):
		operand = self.evaluate(node.operand, scope)
		if is_abrupt(operand): return operand
		return eval_prefix(node.op, operand)

	def visit_InfixExpression(self, node:syntax.InfixExpression, scope:Scope):
		left = self.evaluate(node.lhs, scope)
		if is_abrupt(left): return left
		right = self.evaluate(node.rhs, scope)
		if is_abrupt(right): return right
		return eval_infix(left, node.op, right)

	# Conditional

	def visit_IfExpression(self, node:syntax.IfExpression, scope:Scope):
		return self.eval_if(node.condition, node.consequence, node.alternative, scope)

	def eval_if(self, condition:Phrase, consequence:Phrase, alternative:Optional[Phrase], scope:Scope):
		test = self.evaluate(condition, scope)
		if is_abrupt(test): return test
		if takes_branch(test):
			return self.evaluate(consequence, scope)
		elif alternative is not None:
			return self.evaluate(alternative, scope)
		else:
			return primitive.NULL

	# Names

	def visit_Identifier(self, node:syntax.Identifier, scope:Scope):
		return self.eval_identifier(node.name, scope)

	def visit_Constant(self, node:syntax.Constant, scope:Scope):
		return self.eval_constant(node.name, scope)

	def visit_InstanceVariable(self, node:syntax.InstanceVariable, scope:Scope):
		return self.eval_instance_variable(node.name, scope)

	def eval_identifier(self, name:str, scope:Scope) -> RoobyValue:
		value, found = scope.env.get(name)
		if found: return value
		receiver = scope.receiver
		return self.dispatch(receiver, name, (), lambda: undefined_variable_or_method(name, receiver))

	@staticmethod
	def eval_constant(name:str, scope:Scope) -> RoobyValue:
		value, found = scope.env.get(name)
		if found: return value
		return constant_not_found(name, scope.receiver)

	@staticmethod
	def eval_instance_variable(name:str, scope:Scope) -> RoobyValue:
		# Classes have instance variables of their own, just like instances do.
		receiver = scope.receiver
		if isinstance(receiver, Receiver):
			try: return receiver.instance_variables[name]
			except KeyError: pass
		return instance_variable_not_found(name, receiver)

	# Method calls

	def dispatch(self, receiver:RoobyValue, name:str, args:Sequence[RoobyValue], missing) -> RoobyValue:
		"""
		Find and run the method `name` on behalf of `receiver`.
		A class answers from its class methods; an instance answers
		from its class's instance methods. Anything else has no methods.
		If there is no such method, the result is whatever `missing()` makes.
		"""
		if isinstance(receiver, RClass):
			method = receiver.lookup_class_method(name)
			invoke = self.invoke_class_method
		elif isinstance(receiver, RObject):
			method = receiver.klass.lookup_instance_method(name)
			invoke = self.invoke_instance_method
		else:
			method = None
		if method is None: return missing()
		return unwrap_return_value(invoke(receiver, method, args))

	def invoke_class_method(self, receiver:RClass, method:Method, args:Sequence[RoobyValue]) -> ReturnCarrier:
		assert isinstance(receiver, RClass), type(receiver)
		self._report.info("Class method", method.name, "on", receiver.inspect())
		return self._activate(receiver, method, args)

	def invoke_instance_method(self, receiver:RObject, method:Method, args:Sequence[RoobyValue]) -> ReturnCarrier:
		assert isinstance(receiver, RObject), type(receiver)
		self._report.info("Instance method", method.name, "on", receiver.inspect())
		return self._activate(receiver, method, args)

	def _activate(self, receiver:RoobyValue, method:Method, args:Sequence[RoobyValue]) -> ReturnCarrier:
		if len(args) != len(method.params):
			return Plain(wrong_argument_count(method.name, len(args), len(method.params)))
		env = method.env.enclose()
		for param, arg in zip(method.params, args):
			env.assign(param, arg)
		result = self.evaluate(method.body, Scope(env, receiver))
		if isinstance(result, EarlyReturn): return result
		return Plain(result)

	def visit_CallExpression(self, node:syntax.CallExpression, scope:Scope):
		if node.receiver is None:
			receiver = scope.receiver
		else:
			receiver = self.evaluate(node.receiver, scope)
			if is_abrupt(receiver): return receiver
		args = []
		for expr in node.arguments:
			arg = self.evaluate(expr, scope)
			if is_abrupt(arg): return arg
			args.append(arg)
		return self.dispatch(receiver, node.method, args, lambda: undefined_method(node.method, receiver))

	# Statements

	def visit_Block(self, node:syntax.Block, scope:Scope):
		result = primitive.NULL
		for statement in node.statements:
			result = self.evaluate(statement, scope)
			if is_abrupt(result): return result
		return result

	def visit_ExpressionStatement(self, node:syntax.ExpressionStatement, scope:Scope):
		return self.evaluate(node.expression, scope)

	def visit_ReturnStatement(self, node:syntax.ReturnStatement, scope:Scope):
		if node.value is None: return EarlyReturn(primitive.NULL)
		value = self.evaluate(node.value, scope)
		if is_abrupt(value): return value
		return EarlyReturn(value)

	def visit_Assignment(self, node:syntax.Assignment, scope:Scope):
		value = self.evaluate(node.value, scope)
		if is_abrupt(value): return value
		return scope.env.assign(node.name, value)

	def visit_InstanceVariableAssignment(self, node:syntax.InstanceVariableAssignment, scope:Scope):
		value = self.evaluate(node.value, scope)
		if is_abrupt(value): return value
		receiver = scope.receiver
		if not isinstance(receiver, Receiver):
			return instance_variable_not_assignable(node.name, receiver)
		receiver.instance_variables[node.name] = value
		return value
