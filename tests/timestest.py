"""
Tests for time literal handling.
"""

#c Copyright 2009 the GAVO Project.
#c
#c This program is free software, covered by the GNU GPL.  See COPYING.


import datetime

from stcscodec.helpers import testhelpers

from stcscodec import common
from stcscodec import times


class ISOParseTest(testhelpers.SimpleSampleComparisonTest):
	functionToRun = staticmethod(times.parseISODT)
	samples = [
		("2000-01-01", datetime.datetime(2000, 1, 1)),
		("2000-01-01T12:30:00", datetime.datetime(2000, 1, 1, 12, 30)),
		("20000101T123000Z", datetime.datetime(2000, 1, 1, 12, 30)),
		("2000-01-01T12:30:00.5", datetime.datetime(2000, 1, 1, 12, 30, 0, 500000)),
		("2000-13-01", "Bad ISO datetime literal: 2000-13-01"),
		("2000-01-01T", "Bad ISO datetime literal: 2000-01-01T"),
	]


class MJDTest(testhelpers.VerboseTest):
	def testJ2000(self):
		self.assertAlmostEqual(
			times.dateTimeToMJD(datetime.datetime(2000, 1, 1, 12)), 51544.5)

	def testMJDZero(self):
		self.assertAlmostEqual(
			times.dateTimeToMJD(datetime.datetime(1858, 11, 17)), 0)

	def testJDConversions(self):
		self.assertEqual(times.jdToMJD(2451545.0), 51544.5)
		self.assertEqual(times.mjdToJD(51544.5), 2451545.0)

	def testBackAndForth(self):
		dt = datetime.datetime(1998, 3, 4, 5, 6, 7)
		diff = times.mjdToDateTime(times.dateTimeToMJD(dt))-dt
		self.assertTrue(abs(diff.total_seconds())<1e-3)

	def testBadLiteral(self):
		self.assertRaisesWithMsg(common.STCLiteralError,
			"Bad ISO datetime literal: yesterday",
			times.parseISODT, ("yesterday",))


class FormatISOTest(testhelpers.VerboseTest):
	def testDefaultDigits(self):
		self.assertEqual(times.formatISO(51544.5), "2000-01-01T12:00:00.0")

	def testNoFraction(self):
		self.assertEqual(times.formatISO(51544.25, 0), "2000-01-01T06:00:00")

	def testRoundingOverMidnight(self):
		self.assertEqual(times.formatISO(51544.9999999999, 1),
			"2000-01-02T00:00:00.0")

	def testFractionalSeconds(self):
		self.assertEqual(times.formatISO(51544+1.5/86400, 2),
			"2000-01-01T00:00:01.50")


if __name__=="__main__":
	testhelpers.main(MJDTest)
