"""
The set of parse-nodes in simple form.
Some parser (not part of this package) builds these bottom-up;
the evaluator walks them. Nodes carry no behavior beyond
remembering their parts and where they came from.
"""
from typing import Optional, Sequence
from .ontology import Phrase, ValueExpression, Statement

class Literal(ValueExpression):
	def __init__(self, value, spot:int=None):
		super().__init__(spot)
		self.value = value
	def __str__(self): return "<Literal %r>" % self.value

class IntegerLiteral(Literal):
	def __init__(self, value:int, spot:int=None):
		assert isinstance(value, int) and not isinstance(value, bool), type(value)
		super().__init__(value, spot)

class StringLiteral(Literal):
	def __init__(self, value:str, spot:int=None):
		assert isinstance(value, str), type(value)
		super().__init__(value, spot)

class BooleanLiteral(Literal):
	def __init__(self, value:bool, spot:int=None):
		assert isinstance(value, bool), type(value)
		super().__init__(value, spot)

class NullLiteral(Literal):
	def __init__(self, spot:int=None):
		super().__init__(None, spot)

def truth(spot:int=None): return BooleanLiteral(True, spot)
def falsehood(spot:int=None): return BooleanLiteral(False, spot)

class Named(ValueExpression):
	""" Any of the several kinds of bare word that get resolved against a scope. """
	def __init__(self, name:str, spot:int=None):
		assert isinstance(name, str), type(name)
		super().__init__(spot)
		self.name = name

class Identifier(Named):
	""" A lower-case word: a local variable, or else a zero-argument method call on self. """
	def __repr__(self): return "<ident:%s>" % self.name

class Constant(Named):
	""" A capitalized word, found only in the environment. """
	def __repr__(self): return "<const:%s>" % self.name

class InstanceVariable(Named):
	""" The name excludes the sigil: `@x` arrives here as "x". """
	def __repr__(self): return "<@%s>" % self.name

class SelfExpression(ValueExpression):
	def __repr__(self): return "<self>"

class PrefixExpression(ValueExpression):
	def __init__(self, op:str, operand:ValueExpression, spot:int=None):
		super().__init__(spot)
		self.op, self.operand = op, operand
	def __str__(self): return "(%s%s)" % (self.op, self.operand)

class InfixExpression(ValueExpression):
	def __init__(self, left:ValueExpression, op:str, right:ValueExpression):
		super().__init__(left.spot)
		self.lhs, self.op, self.rhs = left, op, right
	def __str__(self): return "(%s %s %s)" % (self.lhs, self.op, self.rhs)

class Block(Statement):
	def __init__(self, statements:Sequence[Phrase], spot:int=None):
		super().__init__(spot)
		self.statements = tuple(statements)

class IfExpression(ValueExpression):
	alternative: Optional[Phrase]
	def __init__(self, condition:ValueExpression, consequence:Phrase, alternative:Optional[Phrase]=None, spot:int=None):
		super().__init__(spot)
		self.condition = condition
		self.consequence = consequence
		self.alternative = alternative

class CallExpression(ValueExpression):
	"""
	A method call with an explicit argument list, such as `foo.bar(1, 2)`.
	A missing receiver means the call goes to self.
	"""
	def __init__(self, receiver:Optional[ValueExpression], method:str, arguments:Sequence[ValueExpression]=(), spot:int=None):
		super().__init__(spot)
		self.receiver = receiver
		self.method = method
		self.arguments = tuple(arguments)
	def __str__(self):
		return "%s.%s(%s)" % (self.receiver or "self", self.method, ", ".join(map(str, self.arguments)))

class ExpressionStatement(Statement):
	def __init__(self, expression:ValueExpression):
		super().__init__(expression.spot)
		self.expression = expression

class ReturnStatement(Statement):
	def __init__(self, value:Optional[ValueExpression]=None, spot:int=None):
		super().__init__(spot)
		self.value = value

class Assignment(Statement):
	def __init__(self, name:str, value:ValueExpression, spot:int=None):
		super().__init__(spot)
		self.name, self.value = name, value

class InstanceVariableAssignment(Statement):
	def __init__(self, name:str, value:ValueExpression, spot:int=None):
		super().__init__(spot)
		self.name, self.value = name, value
