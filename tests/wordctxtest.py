"""
Tests for splitting STC-S into words.
"""

#c Copyright 2009 the GAVO Project.
#c
#c This program is free software, covered by the GNU GPL.  See COPYING.


from io import StringIO

from stcscodec.helpers import testhelpers

from stcscodec import wordctx


class LineSourceTest(testhelpers.VerboseTest):
	def _drain(self, getLine):
		res = []
		while True:
			line = getLine()
			if line is None:
				return res
			res.append(line)

	def testString(self):
		self.assertEqual(self._drain(wordctx.makeLineSource("a b\nc")),
			["a b", "c"])

	def testList(self):
		self.assertEqual(self._drain(wordctx.makeLineSource(["x", "y z"])),
			["x", "y z"])

	def testFile(self):
		self.assertEqual(
			self._drain(wordctx.makeLineSource(StringIO("Circle\n1 2 3\n"))),
			["Circle\n", "1 2 3\n"])

	def testCallable(self):
		lines = ["only"]
		getLine = lambda: lines and lines.pop() or None
		self.assertTrue(wordctx.makeLineSource(getLine) is getLine)
		self.assertEqual(self._drain(getLine), ["only"])


class WordContextTest(testhelpers.VerboseTest):
	def testSplitting(self):
		ctx = wordctx.WordContext(["  Time TT\t", "", "MJD  5000 "])
		self.assertEqual([ctx.nextWord() for i in range(4)],
			["Time", "TT", "MJD", "5000"])

	def testEndWithoutDone(self):
		ctx = wordctx.WordContext("Time")
		self.assertEqual(ctx.nextWord(), "Time")
		self.assertEqual(ctx.nextWord(), "")
		self.assertEqual(ctx.nextWord(), "")

	def testEndWithDone(self):
		ctx = wordctx.WordContext("Redshift 0.1")
		ctx.nextWord()
		ctx.done = True
		self.assertEqual(ctx.nextWord(), "0.1")
		self.assertEqual(ctx.nextWord(), None)
		self.assertEqual(ctx.nextWord(), None)

	def testShortSnippet(self):
		ctx = wordctx.WordContext("Circle ICRS 1 2")
		for i in range(3):
			ctx.nextWord()
		self.assertEqual(ctx.getContextSnippet(), "Circle ICRS 1")

	def testSnippetRing(self):
		ctx = wordctx.WordContext(" ".join(str(i) for i in range(15)))
		while ctx.nextWord():
			pass
		self.assertEqual(ctx.getContextSnippet(),
			" ".join(str(i) for i in range(5, 15)))

	def testEmptyWordsNotRecorded(self):
		ctx = wordctx.WordContext("a")
		ctx.nextWord()
		ctx.nextWord()
		ctx.nextWord()
		self.assertEqual(ctx.getContextSnippet(), "a")


if __name__=="__main__":
	testhelpers.main(WordContextTest)
