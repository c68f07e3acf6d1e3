import io
import unittest
from unittest import mock
from rooby import primitive, syntax, diagnostics
from rooby.diagnostics import Report, TooManyIssues
from rooby.tree_walker.types import ERROR, Error, is_error
from rooby.tree_walker.values import RClass
from rooby.tree_walker.executive import run_program, main_scope

class ErrorConstructorTests(unittest.TestCase):

	def test_new_error(self):
		error = diagnostics.new_error("Whatever", "%s and %d", "this", 3)
		self.assertIsInstance(error, Error)
		self.assertEqual(ERROR, error.kind())
		self.assertEqual("Whatever", error.reason)
		self.assertEqual("this and 3", error.message)
		self.assertEqual("ERROR: this and 3", error.inspect())

	def test_taxonomy(self):
		instance = RClass("Foo").new()
		for error, reason, message in [
			(diagnostics.unknown_operator("-", "BOOLEAN"), diagnostics.UNKNOWN_OPERATOR, "unknown operator: -BOOLEAN"),
			(diagnostics.unknown_operator("+", "BOOLEAN", "BOOLEAN"), diagnostics.UNKNOWN_OPERATOR, "unknown operator: BOOLEAN + BOOLEAN"),
			(diagnostics.type_mismatch("INTEGER", "+", "STRING"), diagnostics.TYPE_MISMATCH, "type mismatch: INTEGER + STRING"),
			(diagnostics.undefined_variable_or_method("foo", instance), diagnostics.UNDEFINED_VARIABLE_OR_METHOD, "undefined local variable or method `foo' for <Instance of Foo>"),
			(diagnostics.undefined_method("foo", primitive.TRUE), diagnostics.UNDEFINED_METHOD, "undefined method `foo' for true"),
			(diagnostics.constant_not_found("FOO", instance), diagnostics.CONSTANT_NOT_FOUND, "constant FOO not found in: <Instance of Foo>"),
			(diagnostics.instance_variable_not_found("x", instance), diagnostics.INSTANCE_VARIABLE_NOT_FOUND, "instance variable @x not found in: <Instance of Foo>"),
			(diagnostics.zero_division(), diagnostics.ZERO_DIVISION, "divided by 0"),
			(diagnostics.wrong_argument_count("f", 2, 1), diagnostics.WRONG_ARGUMENT_COUNT, "wrong number of arguments for `f' (given 2, expected 1)"),
			(diagnostics.instance_variable_not_assignable("x", primitive.NULL), diagnostics.INSTANCE_VARIABLE_NOT_ASSIGNABLE, "can't set instance variable @x on: null"),
		]:
			with self.subTest(reason):
				self.assertEqual(reason, error.reason)
				self.assertEqual(message, error.message)

	def test_inspection(self):
		for value, text in [
			(primitive.integer(-4), "-4"),
			(primitive.string("hi"), '"hi"'),
			(primitive.TRUE, "true"),
			(primitive.FALSE, "false"),
			(primitive.NULL, "null"),
			(primitive.INTEGER_CLASS, "<Class:Integer>"),
			(primitive.OBJECT_CLASS.new(), "<Instance of Object>"),
		]:
			with self.subTest(text):
				self.assertEqual(text, value.inspect())

class ReportTests(unittest.TestCase):

	def test_collects_issues(self):
		report = Report(verbose=False)
		self.assertTrue(report.ok())
		error = diagnostics.zero_division()
		report.issue(error)
		self.assertTrue(report.sick())
		self.assertEqual((error,), report.issues)
		report.reset()
		self.assertTrue(report.ok())

	def test_too_many_issues(self):
		report = Report(verbose=False, max_issues=2)
		report.issue(diagnostics.zero_division())
		with self.assertRaises(TooManyIssues):
			report.issue(diagnostics.zero_division())

	@mock.patch("sys.stderr", new_callable=io.StringIO)
	def test_info_only_when_verbose(self, stderr):
		Report(verbose=0).info("quiet")
		self.assertEqual("", stderr.getvalue())
		Report(verbose=1).info("loud", 1)
		self.assertEqual("loud 1\n", stderr.getvalue())

	@mock.patch("sys.stderr", new_callable=io.StringIO)
	def test_complain_to_console(self, stderr):
		report = Report()
		report.issue(diagnostics.type_mismatch("INTEGER", "+", "STRING"))
		report.complain_to_console()
		self.assertIn("TypeMismatch: type mismatch: INTEGER + STRING", stderr.getvalue())

	@mock.patch("sys.stderr", new_callable=io.StringIO)
	def test_assert_no_issues(self, stderr):
		report = Report()
		report.assert_no_issues("fine")
		report.issue(diagnostics.zero_division())
		with self.assertRaises(AssertionError):
			report.assert_no_issues("not fine")
		self.assertIn("divided by 0", stderr.getvalue())

class ExecutiveTests(unittest.TestCase):

	def setUp(self) -> None:
		primitive.reset_runtime()

	def tearDown(self) -> None:
		primitive.reset_runtime()

	def test_result_of_last_statement(self):
		result = run_program([
			syntax.Assignment("x", syntax.IntegerLiteral(6)),
			syntax.ExpressionStatement(syntax.InfixExpression(syntax.Identifier("x"), "*", syntax.IntegerLiteral(7))),
		])
		self.assertEqual(42, result.value)

	def test_empty_program(self):
		self.assertIs(primitive.NULL, run_program([]))

	def test_top_level_return(self):
		result = run_program([
			syntax.ReturnStatement(syntax.StringLiteral("early")),
			syntax.ExpressionStatement(syntax.StringLiteral("late")),
		])
		self.assertEqual("early", result.value)

	def test_built_in_constants(self):
		for name in "Object", "Class", "Integer", "String", "Boolean", "Null":
			with self.subTest(name):
				result = run_program([syntax.ExpressionStatement(syntax.Constant(name))])
				self.assertIs(primitive.built_in_classes[name], result)

	def test_self_is_a_plain_object(self):
		result = run_program([syntax.ExpressionStatement(syntax.SelfExpression())])
		self.assertIs(primitive.OBJECT_CLASS, result.klass)

	def test_top_level_sees_object_methods(self):
		primitive.OBJECT_CLASS.define_method("greeting", (), syntax.Block([
			syntax.ExpressionStatement(syntax.StringLiteral("hello")),
		]))
		result = run_program([syntax.ExpressionStatement(syntax.Identifier("greeting"))])
		self.assertEqual("hello", result.value)

	def test_errors_stop_the_program_and_get_reported(self):
		report = Report()
		result = run_program([
			syntax.ExpressionStatement(syntax.Identifier("undefined_thing")),
			syntax.Assignment("after", syntax.IntegerLiteral(1)),
		], report=report)
		self.assertTrue(is_error(result))
		self.assertEqual((result,), report.issues)
		self.assertEqual("undefined local variable or method `undefined_thing' for <Instance of Object>", result.message)

	def test_scope_can_be_supplied(self):
		scope = main_scope()
		run_program([syntax.Assignment("kept", syntax.IntegerLiteral(1))], scope=scope)
		value, found = scope.env.get("kept")
		self.assertTrue(found)
		self.assertEqual(1, value.value)

	@mock.patch("sys.stderr", new_callable=io.StringIO)
	def test_verbose_narrates_dispatch(self, stderr):
		primitive.OBJECT_CLASS.define_method("chatty", (), syntax.Block([]))
		run_program([syntax.ExpressionStatement(syntax.Identifier("chatty"))], report=Report(verbose=1))
		self.assertIn("Instance method chatty on <Instance of Object>", stderr.getvalue())


if __name__ == '__main__':
	unittest.main()
