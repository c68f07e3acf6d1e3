"""
Build the built-in classes and the primitive singletons.
Also, the constructors the evaluator uses to make fresh primitive values,
so that every such value gets tagged with the one shared class it belongs to.
"""

from .tree_walker.values import RClass, IntegerObject, BooleanObject, StringObject, NullObject

built_in_classes: dict[str, RClass] = {}

def _built_in_class(name:str, superclass:RClass=None) -> RClass:
	klass = RClass(name, superclass)
	built_in_classes[name] = klass
	return klass

OBJECT_CLASS = _built_in_class("Object")
CLASS_CLASS = _built_in_class("Class", OBJECT_CLASS)
INTEGER_CLASS = _built_in_class("Integer", OBJECT_CLASS)
STRING_CLASS = _built_in_class("String", OBJECT_CLASS)
BOOLEAN_CLASS = _built_in_class("Boolean", OBJECT_CLASS)
NULL_CLASS = _built_in_class("Null", OBJECT_CLASS)

TRUE = BooleanObject(True, BOOLEAN_CLASS)
FALSE = BooleanObject(False, BOOLEAN_CLASS)
NULL = NullObject(NULL_CLASS)

_INT64_SPAN = 1 << 64
_INT64_BIAS = 1 << 63
INT64_MIN, INT64_MAX = -_INT64_BIAS, _INT64_BIAS - 1

def native_bool(flag:bool) -> BooleanObject:
	return TRUE if flag else FALSE

def integer(value:int) -> IntegerObject:
	""" Integers are 64 bits wide and wrap around in two's complement. """
	return IntegerObject(((value + _INT64_BIAS) % _INT64_SPAN) - _INT64_BIAS, INTEGER_CLASS)

def string(value:str) -> StringObject:
	return StringObject(value, STRING_CLASS)

def reset_runtime():
	"""
	The built-in classes live for the whole process, but programs
	(and tests) may hang methods and class-level state on them.
	This puts them back the way they started.
	"""
	for klass in built_in_classes.values():
		klass.instance_methods.clear()
		klass.class_methods.clear()
		klass.instance_variables.clear()
