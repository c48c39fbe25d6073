# Copyright (c) 2008 Michael Gold
#
# Permission is hereby granted, free of charge, to any person obtaining
# a copy of this software and associated documentation files (the
# "Software"), to deal in the Software without restriction, including
# without limitation the rights to use, copy, modify, merge, publish,
# distribute, sublicense, and/or sell copies of the Software, and to
# permit persons to whom the Software is furnished to do so, subject to
# the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT.
# IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY
# CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF CONTRACT,
# TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE
# SOFTWARE OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.

"""\
Exception classes raised by mpegheader.  Every header parse failure is a
HeaderError (and therefore a ValueError), so callers scanning a stream can
catch all of them with one clause and treat the offset as "not a frame"."""


class MP3Error(Exception):
	"Base class for all errors raised by this package."


class MP3DataError(MP3Error, ValueError):
	"The input data doesn't have the expected format."


class MP3UsageError(MP3Error):
	"An object was used incorrectly by the caller."


class MP3ImplementationLimit(MP3Error):
	"An internal limit (like a buffer size) was reached."


class HeaderError(MP3DataError):
	"""HeaderError(message, header_bits=None) -> exception

Raised when 4 bytes can't be parsed as an MPEG audio frame header.
'header_bits' holds the 32-bit value that was rejected, or None if there
weren't enough bytes to build one."""
	
	def __init__(self, message, header_bits=None):
		MP3DataError.__init__(self, message)
		self.header_bits = header_bits
	
	def __str__(self):
		msg = MP3DataError.__str__(self)
		if self.header_bits is None:
			return msg
		return '%s (header 0x%08x)' % (msg, self.header_bits)


class TooShort(HeaderError):
	"Fewer than 4 bytes were supplied."

class InvalidSync(HeaderError):
	"The 11-bit sync word isn't 0x7ff."

class InvalidVersion(HeaderError):
	"The version bits are reserved, or indicate the unofficial MPEG 2.5."

class InvalidLayer(HeaderError):
	"The layer bits are reserved."

class InvalidSampleRateIndex(HeaderError):
	"The sampling rate index is the reserved value 3."

class InvalidBitrateIndex(HeaderError):
	"The bitrate index is 0 (free format) or 15 (reserved)."
