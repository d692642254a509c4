"""
Tests for building regions from parsed STC-S.
"""

#c Copyright 2009 the GAVO Project.
#c
#c This program is free software, covered by the GNU GPL.  See COPYING.


import math

from stcscodec.helpers import testhelpers

from stcscodec import channel
from stcscodec import common
from stcscodec import frames
from stcscodec import sphermath
from stcscodec import stcsast
from stcscodec import stcsparse
from stcscodec import wordctx
from stcscodec.units import toRad


def _getSubphrases(text):
	return stcsparse.parseSubphrases(wordctx.WordContext(text),
		lambda level, msg: None)


class _ErrorCircleResource(testhelpers.TestResource):
	"""a parsed circle with a position and errors.
	"""
	def make(self, dependents):
		return channel.parseSTCS("Circle ICRS 10 20 1 Position 10 20 Error 0.1",
			wantArea=True, wantCoords=True)


class UncertaintyTest(testhelpers.VerboseTest):
	resources = [("parsed", _ErrorCircleResource())]

	def testShared(self):
		self.assertTrue(
			self.parsed["AREA"].uncertainty is self.parsed["COORDS"].uncertainty)

	def testUncertaintyCentre(self):
		self.assertAlmostEqualVector(self.parsed["AREA"].uncertainty.centre,
			(10*toRad, 20*toRad), places=3)

	def testUncertaintyWidths(self):
		halfWidths = self.parsed["AREA"].uncertainty.getHalfWidths()
		self.assertAlmostEqual(halfWidths[1]/toRad, 0.1)
		self.assertAlmostEqual(halfWidths[0]/toRad, 0.1/math.cos(20*toRad),
			places=4)

	def testLongitudeIncrement(self):
		sub = _getSubphrases("Position ICRS 10 60 Error 0.1 0.2")["space"]
		unc = sub.coords.uncertainty
		self.assertTrue(unc is sub.area.uncertainty)
		self.assertAlmostEqualVector(unc.centre, (10*toRad, 60*toRad))
		lonWidth, latWidth = unc.getHalfWidths()
		self.assertAlmostEqual(latWidth/toRad, 0.2)
		self.assertAlmostEqual(lonWidth/toRad, 0.2, places=5)

	def testEastwardDistInverts(self):
		for lat in [0, 45, 80]:
			centre = (1., lat*toRad)
			reached, _ = sphermath.getGCOffset(centre, math.pi/2, 0.01)
			self.assertAlmostEqual(
				sphermath.getEastwardDist(centre[1], reached[0]-centre[0]),
				0.01, places=12)

	def testFlat(self):
		sub = _getSubphrases("Position UNKNOWNFrame CART2 1 2 Error 0.5 0.25"
			)["space"]
		self.assertEqual(sub.coords.uncertainty.getBounds(),
			([0.5, 1.75], [1.5, 2.25]))

	def testTimeInUnits(self):
		sub = _getSubphrases("Time TT TOPOCENTER MJD 50000 unit s Error 8640"
			)["time"]
		self.assertAlmostEqualVector(sub.coords.uncertainty.getBounds()[1],
			[0.1])

	def testNoErrorNoUncertainty(self):
		sub = _getSubphrases("Circle ICRS 10 20 1")["space"]
		self.assertEqual(sub.area.uncertainty, None)
		self.assertEqual(stcsast.setUnc(sub.area, None, sub.frame, None, 1),
			None)


class BoxCornersTest(testhelpers.VerboseTest):
	def testFlat(self):
		corners = stcsast.boxCorners(frames.BasicFrame(2), (0, 0), (2, 4))
		for found, expected in zip(corners,
				[(-1, -2), (1, -2), (1, 2), (-1, 2)]):
			self.assertAlmostEqualVector(found, expected)

	def testSky(self):
		corners = stcsast.boxCorners(frames.SkyFrame(), (0, 0),
			(2*toRad, 2*toRad))
		for found, expected in zip(corners,
				[(359, 1), (1, 1), (1, -1), (359, -1)]):
			self.assertAlmostEqualVector([v/toRad for v in found], expected,
				places=3)

	def testSkyEdgesAreMeridians(self):
		corners = stcsast.boxCorners(frames.SkyFrame(), (1, 0.5),
			(0.1, 0.1))
		# right edge: both corners on the same great circle through the
		# point 0.05 east of the centre
		tr, br = corners[1], corners[2]
		self.assertTrue(tr[1]>0.5>br[1])


class FinishTest(testhelpers.VerboseTest):
	def testBadPolygon(self):
		self.assertRaisesWithMsg(common.STCSParseError,
			"Bad space sub-phrase: Polygons need at least three vertices",
			_getSubphrases, ("Polygon ICRS 1 2 3 4",))

	def testNegativeRadius(self):
		self.assertRaisesVerbose(common.STCSParseError,
			_getSubphrases, ("Circle ICRS 1 2 -1",),
			"Negative radius accepted")

	def testFillFactorOnBoth(self):
		sub = _getSubphrases("Circle fillfactor 0.5 ICRS 1 2 3 Position 1 2"
			)["space"]
		self.assertEqual(sub.area.fillFactor, 0.5)
		self.assertEqual(sub.coords.fillFactor, 0.5)

	def testBoxIn3D(self):
		sub = _getSubphrases("Box UNKNOWNFrame CART3 0 0 0 2 4 6")["space"]
		self.assertEqual(sub.area.regionType, "Box")
		self.assertEqual(sub.area.getBounds(), ([-1., -2., -3.], [1., 2., 3.]))


class AssembleTest(testhelpers.VerboseTest):
	def testNothingWanted(self):
		self.assertRaisesWithMsg(common.STCSSelectionError,
			"Reading STC-S was requested to return neither area, coords, nor"
			" properties",
			stcsast.assemble, ({}, False, False, False))

	def testSingleSelection(self):
		res = stcsast.assemble(_getSubphrases("Circle ICRS 1 2 3"), True,
			False, False)
		self.assertEqual(res.regionType, "Circle")

	def testEmpty(self):
		self.assertEqual(stcsast.assemble({}, True, True, False),
			{})

	def testAreaWithoutEnclosure(self):
		res = stcsast.assemble(_getSubphrases(
			"Time TT TOPOCENTER MJD 50000 Position ICRS 1 2"), True, True, False)
		self.assertFalse("AREA" in res)
		self.assertEqual(res["COORDS"].regionType, "Prism")
		self.assertEqual(res["COORDS"].naxes, 3)

	def testCoordsNeedAllSubphrases(self):
		res = stcsast.assemble(_getSubphrases(
			"Time TT TOPOCENTER MJD 50000 Circle ICRS 1 2 3"), True, True, False)
		self.assertFalse("COORDS" in res)
		self.assertEqual([c.regionType for c in res["AREA"].components],
			["PointList", "Circle"])

	def testFoldOrder(self):
		res = stcsast.assemble(_getSubphrases(
			"TimeInterval TT TOPOCENTER MJD 1 MJD 2\n"
			"Circle ICRS TOPOCENTER 1 2 3\n"
			"SpectralInterval TOPOCENTER 1 2\n"
			"RedshiftInterval TOPOCENTER VELOCITY OPTICAL 0 1"), True, False, False)
		self.assertEqual([c.frame.kind for c in res.components],
			["time", "sky", "spectral", "redshift"])
		self.assertEqual(res.naxes, 5)

	def testProps(self):
		res = stcsast.assemble(_getSubphrases(
			"Time TT TOPOCENTER MJD 50000 Position ICRS 1 2"), False, False, True)
		self.assertEqual(list(res.keys()), ["TIME_PROPS", "SPACE_PROPS"])
		self.assertEqual(res["SPACE_PROPS"]["POSITION"], "1 2")


if __name__=="__main__":
	testhelpers.main(AssembleTest)
