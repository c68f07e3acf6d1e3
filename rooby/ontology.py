"""
These most-fundamental classes in the syntax class hierarchy
are separate from the rest to avoid circular imports between
the syntax tree and the run-time values that refer to it.

Nodes arrive from some parser that is not part of this package.
A parser may record where each node came from with a "spot",
which is just an integer index into its own token table.
"""

class Phrase:
	spot: int  # zero-spot means synthesized, not from source text.

	def __init__(self, spot=None):
		assert isinstance(spot, int) or spot is None, type(spot)
		self.spot = spot or 0

class ValueExpression(Phrase):
	""" Something that, evaluated in a scope, produces a value. """

class Statement(Phrase):
	""" Something that appears in a block and may interrupt it. """
