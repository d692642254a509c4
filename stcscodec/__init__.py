"""
Reading and writing STC-S, the string serialization of VO
Space-Time-Coordinates.

An STC-S description has up to four sub-phrases (time, space, spectral,
redshift).  Reading turns it into regions (the area enclosed and the
coordinates given) and a property tree holding the words as they were
found.  Writing goes the other way, re-using the property tree where the
regions do not say everything STC-S can express.

The main entry point is StcsChannel; parseSTCS and getSTCS are shortcuts
for the common cases.  Regions and frames are in the regions and frames
submodules.
"""

#c Copyright 2009 the GAVO Project.
#c
#c This program is free software, covered by the GNU GPL.  See COPYING.


from stcscodec.common import (STCError, STCSParseError, STCLiteralError,
	STCInternalError, STCValueError, STCUnitError, STCNotImplementedError,
	STCSWriteError, STCSSelectionError, STCSWarning, subphraseKeys)

from stcscodec.times import (parseISODT, dateTimeToMJD, mjdToDateTime,
	jdToMJD, mjdToJD)

from stcscodec.frames import (BasicFrame, SkyFrame, TimeFrame, SpecFrame,
	CmpFrame)

from stcscodec.regions import (Interval, Box, Circle, Ellipse, Polygon,
	PointList, NullRegion, Prism, LinearMapping)

from stcscodec.channel import StcsChannel, parseSTCS, getSTCS

from stcscodec import logger
