"""
Configuration of the STC-S codec.

This is a wrapper around ConfigParser that defines syntax and types within
the configuration options.  The codec's configuration is read on import
from /etc/stcscodec.rc and the file named in $STCSCODEC_SETTINGS (which
defaults to ~/.stcscodecrc).  Use getConfig(section, name) to read items.
"""

#c Copyright 2009 the GAVO Project.
#c
#c This program is free software, covered by the GNU GPL.  See COPYING.

import configparser
import os

defaultSection = "general"  # must be all lowercase


class ConfigError(Exception):
	"""is the base class of the user visible exceptions from this module.
	"""

class ParseError(ConfigError):
	"""is raised by ConfigItem's parse methods if there is a problem with
	the input.

	These should only escape to users of this module unless they call
	ConfigItem.set themselves (which they shouldn't).
	"""

class NoConfigItem(ConfigError):
	"""is raised by Configuration if a non-existing configuration
	item is set or requested.
	"""

class BadConfigValue(ConfigError):
	"""is raised by addFromFp when there is a syntax error or the
	like in a value.

	The error message gives a hint at the reason of the error and is intended
	for human consumption.
	"""

class SyntaxError(ConfigError):
	"""is raised when the input file syntax is bad (i.e., on
	configparser.ParsingErrors)
	"""


class ConfigItem(object):
	"""is a description of a configuration item including methods
	to parse and unparse them.

	This class is an abstract base class for options with real syntax
	(_parse and _unparse methods).

	ConfigItems have a section and a name (as in ConfigParser), a
	value (that defaults to default), an origin (which is "default",
	if the value has not been changed and otherwise can be freely
	used  by clients), and a description.

	The _parse methods must take a string and return anything or raise
	ParseErrors (with a sensible description of the problem) if there
	is a problem with the input.  _unparse methods must not raise exceptions,
	take a value as returned by parse and return a string that _parse would
	parse into this value.

	Inheriting classes need to specify a class attribute default that
	kicks in when no default has been specified during construction.
	These must be strings parseable by _parse.
	"""

	typedesc = "unspecified value"

	def __init__(self, name, section=defaultSection, default=None,
			description="Undocumented"):
		self.section, self.name = section, name
		if default is None:
			default = self.default
		self.default = default
		self.set(default, "default")
		self.description = description

	def set(self, value, origin="user"):
		self.value, self.origin = self._parse(value), origin

	def getAsString(self):
		return self._unparse(self.value)

	def _parse(self, value):
		raise ParseError("Internal error: Base config item used.")

	def _unparse(self, value):
		return value


class StringConfigItem(ConfigItem):
	"""is a config item containing strings.

	The special value None is used as a Null value literal.
	"""

	typedesc = "string"
	default = ""

	def _parse(self, value):
		if value=="None":
			return None
		if not isinstance(value, str):
			raise ParseError("Only strings are allowed in %s, not %s"%(
				self.__class__.__name__, repr(value)))
		return value

	def _unparse(self, value):
		if value is None:
			return "None"
		return value


class IntConfigItem(ConfigItem):
	"""is a config item containing an integer.

	It supports a Null value through the special None literal.
	>>> ci = IntConfigItem("foo"); print(ci.value)
	None
	>>> ci = IntConfigItem("foo", default="23"); ci.value
	23
	>>> ci.set("42"); ci.value
	42
	>>> ci.getAsString()
	'42'
	"""

	typedesc = "integer"
	default = "None"

	def _parse(self, value):
		if value=="None":
			return None
		try:
			return int(value)
		except ValueError:
			raise ParseError("%s is not an integer literal"%value)

	def _unparse(self, value):
		return str(value)


class BooleanConfigItem(ConfigItem):
	"""is a config item that contains a boolean and can be parsed from
	many fancy representations.
	"""

	typedesc = "boolean"
	default = "False"

	trueLiterals = set(["true", "yes", "t", "on", "enabled", "1"])
	falseLiterals = set(["false", "no", "f", "off", "disabled", "0"])
	def _parse(self, value):
		value = value.lower()
		if value in self.trueLiterals:
			return True
		elif value in self.falseLiterals:
			return False
		else:
			raise ParseError("'%s' is no recognized boolean literal."%value)

	def _unparse(self, value):
		return {True: "True", False: "False"}[value]


class EnumeratedConfigItem(StringConfigItem):
	"""is a ConfigItem taking string values out of a set of possible strings.

	Use the keyword argument options to pass in the possible strings.
	The first item becomes the default unless you give a default.
	You must give a non-empty list of strings as options.
	"""

	typedesc = "value from a defined set"

	def __init__(self, name, section=defaultSection, default=None,
			description="Undocumented", options=[]):
		if default is None:
			default = options[0]
		self.options = list(options)
		self.typedesc = "value from the list %s"%(", ".join(self.options))
		StringConfigItem.__init__(self, name, section, default, description)

	def _parse(self, value):
		encVal = StringConfigItem._parse(self, value)
		if encVal not in self.options:
			raise ParseError("%s is not an allowed value.  Choose one of"
				" %s"%(value, ", ".join(self.options)))
		return encVal


class Configuration(object):
	"""is a collection of ConfigItems and provides an interface to access them.

	You construct it with the ConfigItems you want and then use the get
	method to access their content.  You can either use get(section, name)
	or just get(name), which implies the defaultSection section defined
	at the top (right now, "general").

	To read configuration items, use addFromFp.  addFromFp should only
	raise subclasses of ConfigError.

	The class follows the default behaviour of ConfigParser in that section
	case is preserved, but item names are lowercased.
	"""
	def __init__(self, *items):
		self.items = {}
		for item in items:
			self.items[item.section.lower(), item.name.lower()] = item

	def __iter__(self):
		return iter(self.items)

	def _getItem(self, section, name):
		try:
			return self.items[section.lower(), name.lower()]
		except KeyError:
			raise NoConfigItem("No such configuration item: [%s] %s"%(
				section, name))

	def get(self, arg1, arg2=None):
		if arg2 is None:
			section, name = defaultSection, arg1
		else:
			section, name = arg1, arg2
		return self._getItem(section, name).value

	def set(self, arg1, arg2, arg3=None, origin="user"):
		"""sets a configuration item to a value.

		arg1 can be a section, in which case arg2 is a key and arg3 is a
		value; alternatively, if arg3 is not given, arg1 is a key in
		the defaultSection, and arg2 is the value.

		All arguments are strings that must be parseable by the referenced
		item's _parse method.
		"""
		if arg3 is None:
			section, name, value = defaultSection, arg1, arg2
		else:
			section, name, value = arg1, arg2, arg3
		return self._getItem(section, name).set(value, origin)

	def addFromFp(self, fp, origin="user", fName="<internal>"):
		"""adds the config items in the file fp to self.
		"""
		p = configparser.ConfigParser(interpolation=None)
		try:
			p.read_file(fp, fName)
		except configparser.Error as msg:
			raise SyntaxError("Config syntax error in %s: %s"%(fName, msg))
		for section in p.sections():
			for name, value in p.items(section):
				try:
					self.set(section, name, value, origin)
				except ParseError as msg:
					raise BadConfigValue("While parsing value of %s in section %s,"
						" file %s:\n%s"%(name, section, fName, msg))


def _addToConfig(config, fName, origin):
	"""adds the config items in the file named in fName to the Configuration,
	tagging them with origin.

	fName can be None or point to a non-exisiting file.  In both cases,
	the function does nothing.
	"""
	if not fName or not os.path.exists(fName):
		return
	with open(fName) as f:
		config.addFromFp(f, origin=origin, fName=fName)


def readConfiguration(config, systemFName, userFName):
	"""fills the Configuration config with values from the the two locations.

	File names that are none or point to non-existing locations are
	ignored.
	"""
	_addToConfig(config, systemFName, "system")
	_addToConfig(config, userFName, "user")


def makeDefaultConfiguration():
	"""returns a Configuration with the codec's items at their defaults.
	"""
	return Configuration(
		EnumeratedConfigItem("logLevel", options=["warning", "debug", "info",
			"error", "critical"], description="Level of log messages"
			" emitted by the codec."),
		StringConfigItem("logFile", default="None", description="If given,"
			" log messages go to this file in addition to stderr."),
		IntConfigItem("reportLevel", default="3", description="Warnings"
			" with levels above this are not reported."),
		BooleanConfigItem("area", "read", "True", description="Return the"
			" region enclosed by the STC-S description by default?"),
		BooleanConfigItem("coords", "read", "False", description="Return the"
			" positions given in the STC-S description by default?"),
		BooleanConfigItem("props", "read", "False", description="Return the"
			" property tree of the STC-S description by default?"),
		BooleanConfigItem("full", "write", "False", description="Write"
			" fields even if they only contain default values?"),
		IntConfigItem("defaultDigits", "write", "7", description="Significant"
			" digits for spatial values that have no stored format."),
	)


systemConfigPath = "/etc/stcscodec.rc"

def getUserConfigPath():
	return os.environ.get("STCSCODEC_SETTINGS",
		os.path.join(os.environ.get("HOME", "/"), ".stcscodecrc"))


_config = makeDefaultConfiguration()
readConfiguration(_config, systemConfigPath, getUserConfigPath())

getConfig = _config.get
setConfig = _config.set


def _test():
	import doctest
	from stcscodec import config
	doctest.testmod(config)

if __name__=="__main__":
	_test()
