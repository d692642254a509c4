"""
Tests for reading and writing STC-S through channels.
"""

#c Copyright 2009 the GAVO Project.
#c
#c This program is free software, covered by the GNU GPL.  See COPYING.


from io import StringIO

from stcscodec.helpers import testhelpers

from stcscodec import channel
from stcscodec import common
from stcscodec import frames
from stcscodec import regions


def _roundtrip(stcs, full=False):
	ch = channel.StcsChannel(stcs, wantArea=True, wantCoords=True,
		wantProps=True, full=full)
	ch.write(ch.read())
	return "\n".join(ch.lines)


class RoundtripTest(testhelpers.SimpleSampleComparisonTest):
	functionToRun = staticmethod(_roundtrip)

	samples = [
		("Circle ICRS TOPOCENTER SPHER2 10 20 0.5",
			"Circle ICRS TOPOCENTER 10 20 0.5"),
		("Box ICRS TOPOCENTER 10 20 2 3",
			"Box ICRS TOPOCENTER 10 20 2 3"),
		("SpectralInterval TOPOCENTER 1 2 unit Hz",
			"SpectralInterval TOPOCENTER 1 2"),
		("Time TT TOPOCENTER MJD 50000.5",
			"Time TT TOPOCENTER MJD 50000.5"),
		("TimeInterval TT TOPOCENTER MJD 50000 MJD 50001",
			"TimeInterval TT TOPOCENTER MJD 50000 MJD 50001"),
		("Position ICRS TOPOCENTER 10 20 Error 0.1 0.1",
			"Position ICRS TOPOCENTER 10 20 Error 0.1 0.1"),
		("Time TOPOCENTER MJD 50000",
			"Time TAI TOPOCENTER MJD 50000"),
		("Time TT TOPOCENTER 1995-10-10T12:30:00.25",
			"Time TT TOPOCENTER 1995-10-10T12:30:00.25"),
		("TimeInterval TT TOPOCENTER 1995-10-10T12:30:00.25 1995-10-11T00:00:00.5",
			"TimeInterval TT TOPOCENTER 1995-10-10T12:30:00.25"
				" 1995-10-11T00:00:00.5"),
		("Circle ICRS TOPOCENTER 10 60 1 Position 10 60 Error 0.500000 0.500000",
			"Circle ICRS TOPOCENTER 10 60 1 Position 10 60 Error 0.500000 0.500000"),
		("Position ICRS TOPOCENTER 10 80 Error 0.25 0.50",
			"Position ICRS TOPOCENTER 10 80 Error 0.25 0.50"),
		("Redshift BARYCENTER VELOCITY OPTICAL 300 unit m/s",
			"Redshift BARYCENTER 0.3"),
		("Redshift BARYCENTER VELOCITY OPTICAL 300",
			"Redshift BARYCENTER 300"),
		("SpectralInterval TOPOCENTER 1.5 2.25 unit GHz",
			"SpectralInterval TOPOCENTER 1.5 2.25 unit GHz"),
	]


class FullRoundtripTest(testhelpers.VerboseTest):
	def testCircle(self):
		self.assertEqual(_roundtrip("Circle ICRS TOPOCENTER SPHER2 10 20 0.5",
			full=True), "Circle fillfactor 1 ICRS TOPOCENTER SPHER2 10 20 0.5")

	def testSpectral(self):
		self.assertEqual(_roundtrip("SpectralInterval TOPOCENTER 1 2 unit Hz",
			full=True), "SpectralInterval fillfactor 1 TOPOCENTER 1 2 unit Hz")


class ReadTest(testhelpers.VerboseTest):
	def testOptionalFieldsLeftOut(self):
		tree = channel.parseSTCS("Circle ICRS 10 20 1", wantArea=False,
			wantProps=True)
		self.assertEqual(list(tree.keys()), ["SPACE_PROPS"])
		for key in ["ERROR", "RESOLUTION", "PIXSIZE", "SIZE"]:
			self.assertFalse(key in tree["SPACE_PROPS"])

	def testAreaOnly(self):
		area = channel.parseSTCS("Circle ICRS 10 20 1")
		self.assertEqual(area.regionType, "Circle")

	def testCompositeOnlyHasProduced(self):
		res = channel.parseSTCS("Circle ICRS 10 20 0.5", wantArea=True,
			wantCoords=True)
		self.assertEqual(list(res.keys()), ["AREA"])

	def testLineList(self):
		res = channel.StcsChannel(["Time TT TOPOCENTER MJD 50000",
			"Position ICRS 1 2"], wantArea=False, wantCoords=True).read()
		self.assertEqual(res.naxes, 3)

	def testNoSource(self):
		self.assertRaisesWithMsg(common.STCValueError,
			"No source to read STC-S from",
			channel.StcsChannel().read, ())

	def testParseErrorPropagates(self):
		self.assertRaisesVerbose(common.STCSParseError,
			channel.parseSTCS, ("Circle ICRS 10 20 foo",),
			"Bad radius accepted")


class WarningsTest(testhelpers.VerboseTest):
	def testReported(self):
		with testhelpers.messageCollector() as ui:
			ch = channel.StcsChannel("Time TOPOCENTER MJD 50000", reportLevel=3)
			ch.read()
		self.assertEqual(ui.events, [("Warning", (common.STCSWarning(2,
			"Time scale defaulting to 'TAI' in an STC-S description:"
			" 'Time TOPOCENTER'."),), {})])

	def testFiltered(self):
		with testhelpers.messageCollector() as ui:
			ch = channel.StcsChannel("Time TOPOCENTER MJD 50000", reportLevel=1)
			ch.read()
		self.assertEqual(ui.events, [])
		self.assertEqual(len(ch.warnings), 1)
		self.assertEqual(ch.getWarnings(), [])
		self.assertEqual(ch.getWarnings(3)[0].level, 2)

	def testResetPerOperation(self):
		with testhelpers.messageCollector():
			ch = channel.StcsChannel("Time TOPOCENTER MJD 50000")
			ch.read()
			ch.read("Time TT TOPOCENTER MJD 50000")
		self.assertEqual(ch.warnings, [])


class WriteTest(testhelpers.VerboseTest):
	def _getCircle(self):
		return channel.parseSTCS("Circle ICRS TOPOCENTER 10 20 0.5",
			wantCoords=True, wantProps=True)

	def testFileSink(self):
		f = StringIO()
		self.assertTrue(channel.StcsChannel(sink=f).write(self._getCircle()))
		self.assertEqual(f.getvalue(), "Circle ICRS TOPOCENTER 10 20 0.5\n")

	def testCallableSink(self):
		collected = []
		channel.StcsChannel(sink=lambda line: collected.append(line.upper())
			).write(self._getCircle())
		self.assertEqual(collected, ["CIRCLE ICRS TOPOCENTER 10 20 0.5"])

	def testBadSink(self):
		self.assertRaisesWithMsg(common.STCValueError,
			"Cannot use 5 as an STC-S sink",
			channel.StcsChannel, (), sink=5)

	def testRejected(self):
		ch = channel.StcsChannel()
		with testhelpers.messageCollector() as ui:
			self.assertFalse(ch.write(
				regions.Interval(frames.SpecFrame(), [1], [None])))
		self.assertEqual(ch.lines, [])
		self.assertEqual(ch.warnings, [common.STCSWarning(1,
			"Cannot write out an unbounded spectral interval.")])
		self.assertEqual(ui.events[1], ("Error", ("STC-S not written: Cannot write"
			" out an unbounded spectral interval.",), {}))

	def testInfoOnWrite(self):
		circle = self._getCircle()
		with testhelpers.messageCollector() as ui:
			self.assertTrue(channel.StcsChannel().write(circle))
		self.assertEqual(ui.events, [("Info", ("Wrote 1 line(s) of STC-S",), {})])

	def testGetSTCS(self):
		self.assertEqual(channel.getSTCS(self._getCircle()),
			"Circle ICRS TOPOCENTER 10 20 0.5")

	def testGetSTCSRaises(self):
		self.assertRaisesVerbose(common.STCSWriteError,
			channel.getSTCS,
			(regions.Interval(frames.SpecFrame(), [1], [None]),),
			"Unbounded interval written")


class ConfigDefaultsTest(testhelpers.VerboseTest):
	def testDefaults(self):
		ch = channel.StcsChannel()
		self.assertEqual((ch.wantArea, ch.wantCoords, ch.wantProps, ch.full),
			(True, False, False, False))
		self.assertEqual(ch.reportLevel, 3)

	def testOverrides(self):
		ch = channel.StcsChannel(wantArea=False, full=True, reportLevel=1)
		self.assertEqual((ch.wantArea, ch.full, ch.reportLevel),
			(False, True, 1))


if __name__=="__main__":
	testhelpers.main(WriteTest)
