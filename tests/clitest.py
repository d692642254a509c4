"""
Tests for the stcscodec command line interface.
"""

#c Copyright 2009 the GAVO Project.
#c
#c This program is free software, covered by the GNU GPL.  See COPYING.


import logging

from stcscodec.helpers import testhelpers

from stcscodec import cli
from stcscodec import config
from stcscodec import logger


def _runCLI(*argv):
	with testhelpers.messageCollector():
		return testhelpers.captureOutput(cli.main, (list(argv),))


class CommandsTest(testhelpers.VerboseTest):
	def testRoundtrip(self):
		retVal, out, err = _runCLI("roundtrip",
			"Circle ICRS TOPOCENTER SPHER2 10 20 0.5")
		self.assertEqual(retVal, None)
		self.assertEqual(out, "Circle ICRS TOPOCENTER 10 20 0.5\n")

	def testFullRoundtrip(self):
		retVal, out, err = _runCLI("--full", "roundtrip",
			"Circle", "ICRS", "TOPOCENTER", "10", "20", "0.5")
		self.assertEqual(out,
			"Circle fillfactor 1 ICRS TOPOCENTER SPHER2 10 20 0.5\n")

	def testRoundtripWarnings(self):
		retVal, out, err = _runCLI("roundtrip", "Time TOPOCENTER MJD 50000")
		self.assertEqual(out.split("\n"), [
			"Warning (level 2): Time scale defaulting to 'TAI' in an STC-S"
				" description: 'Time TOPOCENTER'.",
			"Time TAI TOPOCENTER MJD 50000",
			""])

	def testWarningsSuppressed(self):
		retVal, out, err = _runCLI("-r", "1", "roundtrip",
			"Time TOPOCENTER MJD 50000")
		self.assertEqual(out, "Time TAI TOPOCENTER MJD 50000\n")

	def testProps(self):
		retVal, out, err = _runCLI("props", "Circle ICRS 10 20 0.5")
		self.assertTrue(out.startswith("SPACE_PROPS:\n  ID = Circle\n"))
		self.assertTrue("  RADIUS = 0.5\n" in out)

	def testParse(self):
		retVal, out, err = _runCLI("parse", "Circle ICRS 10 20 0.5")
		self.assertEqual(retVal, None)
		self.assertTrue("Area:\n  <Circle" in out, out)
		self.assertTrue("Coords:\n  (none)" in out)

	def testDebug(self):
		try:
			retVal, out, err = _runCLI("--debug", "roundtrip",
				"Circle ICRS TOPOCENTER SPHER2 10 20 0.5")
			self.assertEqual(out, "Circle ICRS TOPOCENTER 10 20 0.5\n")
			self.assertEqual(config.getConfig("logLevel"), "debug")
			self.assertEqual(logger.logger.level, logging.DEBUG)
		finally:
			config.setConfig("logLevel", "warning")
			logger.setLogLevel("warning")


class ErrorsTest(testhelpers.VerboseTest):
	def testHelp(self):
		retVal, out, err = _runCLI("help")
		self.assertEqual(retVal, None)
		self.assertTrue("Commands include:" in err)
		self.assertTrue("roundtrip [<stcs>] -- parse STC-S and write it out"
			" again." in err)

	def testNoCommand(self):
		retVal, out, err = _runCLI()
		self.assertEqual(retVal, 1)
		self.assertTrue("Commands include:" in err)

	def testUnknownCommand(self):
		retVal, out, err = _runCLI("frobnicate")
		self.assertEqual(retVal, 1)
		self.assertEqual(err, "Unknown command: frobnicate.\n")

	def testParseError(self):
		retVal, out, err = _runCLI("parse", "Circle ICRS 10 20 foo")
		self.assertEqual(retVal, 1)
		self.assertTrue(err.startswith("STC-S expression '"), err)


if __name__=="__main__":
	testhelpers.main(CommandsTest)
