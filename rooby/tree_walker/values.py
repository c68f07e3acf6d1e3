"""
This module defines the specialized value-types that the tree-walker operates in terms of.
Primitive values carry a reference to their class, which is shared and never copied.
Classes and instances are shared by reference too, so instance variables set through
one reference show up through every other.
"""
from typing import NamedTuple, Optional, Sequence
from .. import syntax
from .types import RoobyValue, INTEGER, BOOLEAN, STRING, NULL, CLASS, OBJECT

class IntegerObject(RoobyValue):
	def __init__(self, value:int, klass:"RClass"):
		self.value, self.klass = value, klass
	def kind(self): return INTEGER
	def inspect(self): return str(self.value)

class BooleanObject(RoobyValue):
	""" There should only ever be two of these. See primitive.TRUE and primitive.FALSE """
	def __init__(self, value:bool, klass:"RClass"):
		self.value, self.klass = value, klass
	def kind(self): return BOOLEAN
	def inspect(self): return "true" if self.value else "false"

class StringObject(RoobyValue):
	def __init__(self, value:str, klass:"RClass"):
		self.value, self.klass = value, klass
	def kind(self): return STRING
	def inspect(self): return '"%s"' % self.value

class NullObject(RoobyValue):
	def __init__(self, klass:"RClass"):
		self.klass = klass
	def kind(self): return NULL
	def inspect(self): return "null"

###############################################################################

class Environment:
	"""
	Variable bindings, chained to an outer environment.
	Lookup searches outward; assignment is always local.
	"""
	def __init__(self, outer:Optional["Environment"]=None):
		self._bindings = {}
		self._outer = outer

	def get(self, name:str) -> tuple[Optional[RoobyValue], bool]:
		env = self
		while env is not None:
			try: return env._bindings[name], True
			except KeyError: env = env._outer
		return None, False

	def assign(self, name:str, value:RoobyValue) -> RoobyValue:
		self._bindings[name] = value
		return value

	def enclose(self) -> "Environment":
		return Environment(self)

class Scope(NamedTuple):
	env: Environment
	receiver: RoobyValue  # The language calls this "self".

class Method(NamedTuple):
	name: str
	params: tuple[str, ...]
	body: syntax.Block
	env: Environment  # Where the method was defined; the body sees these bindings.

###############################################################################

class Receiver(RoobyValue):
	""" Something with instance variables and methods: a class, or an instance of one. """
	instance_variables: dict[str, RoobyValue]

	def __init__(self):
		self.instance_variables = {}

class RClass(Receiver):
	def __init__(self, name:str, superclass:Optional["RClass"]=None):
		super().__init__()
		self.name = name
		self.superclass = superclass
		self.instance_methods = {}
		self.class_methods = {}

	def kind(self): return CLASS
	def inspect(self): return "<Class:%s>" % self.name

	def define_method(self, name:str, params:Sequence[str], body:syntax.Block, env:Environment=None) -> Method:
		method = _method(name, params, body, env)
		self.instance_methods[name] = method
		return method

	def define_class_method(self, name:str, params:Sequence[str], body:syntax.Block, env:Environment=None) -> Method:
		method = _method(name, params, body, env)
		self.class_methods[name] = method
		return method

	def lookup_instance_method(self, name:str) -> Optional[Method]:
		return self._lookup("instance_methods", name)

	def lookup_class_method(self, name:str) -> Optional[Method]:
		return self._lookup("class_methods", name)

	def _lookup(self, table:str, name:str) -> Optional[Method]:
		klass = self
		while klass is not None:
			try: return getattr(klass, table)[name]
			except KeyError: klass = klass.superclass
		return None

	def new(self) -> "RObject":
		return RObject(self)

def _method(name, params, body, env) -> Method:
	assert isinstance(body, syntax.Block), type(body)
	return Method(name, tuple(params), body, Environment() if env is None else env)

class RObject(Receiver):
	def __init__(self, klass:RClass):
		assert isinstance(klass, RClass), type(klass)
		super().__init__()
		self.klass = klass

	def kind(self): return OBJECT
	def inspect(self): return "<Instance of %s>" % self.klass.name
