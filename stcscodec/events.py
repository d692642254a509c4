"""
General event handling.

Everything roughly classified as user interaction goes through this
module.  On import, an instance of EventDispatcher is created and
installed as ui.  The rest of the library calls its notify methods.

Clients can then register callbacks that subscribe to events and display
or log them in some form appropriate to the client.
"""

#c Copyright 2009 the GAVO Project.
#c
#c This program is free software, covered by the GNU GPL.  See COPYING.


class DispatcherType(type):
	"""is a metaclass for dispatching of messages.

	Basically, you define methods called notify<whatever> in your class.
	For each of them, a subscribe<whatever> method is added.

	Then, when notify<whatever> is called, your defined method is called,
	and its result is then passed to all callbacks passed in through
	subscribe<whatever>.
	"""
	def __init__(cls, name, bases, dict):
		type.__init__(cls, name, bases, dict)
		cls.eventTypes = []
		cls._makeNotifiers(dict)

	def _makeNotifier(cls, name, callable):
		cls.eventTypes.append(name)
		def notify(self, *args, **kwargs):
			res = callable(self, *args, **kwargs)
			for callback in self.callbacks[name]:
				callback(res)
			return res
		def subscribe(self, callback):
			self.callbacks[name].append(callback)
		setattr(cls, "notify"+name, notify)
		setattr(cls, "subscribe"+name, subscribe)

	def _makeNotifiers(cls, dict):
		for name, val in list(dict.items()):
			if name.startswith("notify"):
				cls._makeNotifier(name[6:], val)


class EventDispatcher(object, metaclass=DispatcherType):
	"""is the central event dispatcher.

	Events are posted by using notify* methods.  Various handlers can
	then attach to them.
	"""
	def __init__(self):
		self.callbacks = dict((name, []) for name in self.eventTypes)

	def notifyError(self, errmsg):
		"""is called when something wants to put out an error message.

		The handlers receive the error message as-is.
		"""
		return errmsg

	def notifyWarning(self, warning):
		"""is called when reading or writing STC-S produces a non-fatal
		problem.

		The handlers receive the STCSWarning instance.
		"""
		return warning

	def notifyInfo(self, message):
		"""is called when something wants to tell the user something
		unimportant.

		The handlers receive the message as-is.
		"""
		return message


ui = EventDispatcher()
