"""
This is the overall control for the run-time:
set up the top-level scope, run some statements, and say what came of it.
"""
from typing import Optional, Sequence
from .. import syntax, primitive
from ..ontology import Phrase
from ..diagnostics import Report
from .types import RoobyValue, EarlyReturn, is_error, unwrap_return_value
from .values import Environment, Scope
from .evaluator import Evaluator

def global_environment() -> Environment:
	""" The outermost bindings: built-in classes, under their constant names. """
	env = Environment()
	for name, klass in primitive.built_in_classes.items():
		env.assign(name, klass)
	return env

def main_scope(env:Optional[Environment]=None) -> Scope:
	""" Top-level code runs with an anonymous instance of Object as self. """
	outer = global_environment() if env is None else env
	return Scope(outer.enclose(), primitive.OBJECT_CLASS.new())

def run_program(statements:Sequence[Phrase], report:Optional[Report]=None, scope:Optional[Scope]=None) -> RoobyValue:
	report = report or Report(verbose=0)
	scope = scope or main_scope()
	report.info("Running", len(statements), "statement(s) as", scope.receiver.inspect())
	result = Evaluator(report).evaluate(syntax.Block(statements), scope)
	if isinstance(result, EarlyReturn):
		result = unwrap_return_value(result)
	if is_error(result):
		report.issue(result)
	return result
