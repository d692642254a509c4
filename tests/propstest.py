"""
Tests for property trees and format inference.
"""

#c Copyright 2009 the GAVO Project.
#c
#c This program is free software, covered by the GNU GPL.  See COPYING.


from stcscodec.helpers import testhelpers

from stcscodec import props


class GetFmtTest(testhelpers.VerboseTest, metaclass=testhelpers.SamplesBasedAutoTest):
	"""tests for format inference from stored literals.
	"""
	samples = [
		(({"RADIUS": "0.5"}, "RADIUS", 0, 7), "%.1f"),
		(({"RADIUS": "10"}, "RADIUS", 0, 7), "%.0f"),
		(({"CENTRE": "10.25 -3.125"}, "CENTRE", 1, 7), "%.3f"),
		(({"CENTRE": "10.25 -3.125"}, "CENTRE", 5, 7), "%.2f"),
		(({"LOLIMIT": "1.5e9"}, "LOLIMIT", 0, 7), "%.2g"),
		(({"LOLIMIT": "2E-3"}, "LOLIMIT", 0, 7), "%.1g"),
		(({"LOLIMIT": "123.456E-3"}, "LOLIMIT", 0, 7), "%.6g"),
		(({"ERROR": ".25"}, "ERROR", 0, 7), "%.2f"),
		(({}, "RADIUS", 0, 9), "%.9g"),
		((None, "RADIUS", 0, 4), "%.4g"),
		(({"RADIUS": ""}, "RADIUS", 0, 5), "%.5g"),
	]

	def _runTest(self, sample):
		(tree, key, index, defDigits), expected = sample
		self.assertEqual(props.getFmt(tree, key, index, defDigits), expected)


class FormatValuesTest(testhelpers.VerboseTest):
	def testSingleFormat(self):
		self.assertEqual(props.formatValues("%.1f", [1, 2.25]), "1.0 2.2")

	def testFormatList(self):
		self.assertEqual(props.formatValues(["%.0f", "%.3f"], [1, 2.25]),
			"1 2.250")


class PutTest(testhelpers.VerboseTest):
	def testPutStringNonDefault(self):
		p = {}
		props.putString(p, "FRAME", "ICRS", "UNKNOWNFrame", False)
		self.assertEqual(p, {"FRAME": "ICRS"})

	def testPutStringDefaultRemoves(self):
		p = {"FRAME": "UNKNOWNFrame"}
		props.putString(p, "FRAME", "UNKNOWNFrame", "UNKNOWNFrame", False)
		self.assertEqual(p, {})

	def testPutStringDefaultFull(self):
		p = {}
		props.putString(p, "FRAME", "UNKNOWNFrame", "UNKNOWNFrame", True)
		self.assertEqual(p, {"FRAME": "UNKNOWNFrame"})

	def testPutFloat(self):
		p = {}
		props.putFloat(p, "FILLFACTOR", 0.25, 1.0, False)
		self.assertEqual(p, {"FILLFACTOR": "0.25"})

	def testPutFloatDefault(self):
		p = {"FILLFACTOR": "1"}
		props.putFloat(p, "FILLFACTOR", 1.0, 1.0, False)
		self.assertEqual(p, {})
		props.putFloat(p, "FILLFACTOR", 1.0, 1.0, True)
		self.assertEqual(p, {"FILLFACTOR": "1"})

	def testPutFloatNone(self):
		p = {"FILLFACTOR": "0.5"}
		props.putFloat(p, "FILLFACTOR", None, 1.0, True)
		self.assertEqual(p, {"FILLFACTOR": "0.5"})


class TreeTest(testhelpers.VerboseTest):
	def testMakeDropsEmpty(self):
		tree = props.makePropertyTree({"TIME_PROPS": {"ID": "Time"},
			"SPACE_PROPS": {}, "JUNK": {"a": "b"}})
		self.assertEqual(tree, {"TIME_PROPS": {"ID": "Time"}})

	def testIsPropertyTree(self):
		self.assertTrue(props.isPropertyTree({"SPACE_PROPS": {}}))
		self.assertFalse(props.isPropertyTree({"AREA": None}))
		self.assertFalse(props.isPropertyTree(["SPACE_PROPS"]))


if __name__=="__main__":
	testhelpers.main(GetFmtTest)
