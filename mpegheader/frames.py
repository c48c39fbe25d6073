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
FrameHeader: an immutable, validated MPEG audio frame header.

The header is the first 4 bytes of every frame.  Parsing reads them as a
single big-endian integer, checks it for reserved or unsupported values, and
keeps the integer; every field is a view onto those bits."""

import logging
import struct
from . import mp3bits, errors
from .mp3bits import Version, Layer, ChannelMode


log = logging.getLogger(__name__)


# create a read-only bitfield property (used by FrameHeader)
def _bitfield(pos, mask):
	def getbits(self):
		return (self._header_bits >> pos) & mask
	
	return property(getbits, None, None,
			"bit position %d, mask 0x%x" % (pos, mask))

def _flag(pos):
	def getflag(self):
		return bool((self._header_bits >> pos) & 1)
	
	return property(getflag, None, None, "bit position %d" % pos)


def _unpack(header):
	if isinstance(header, bool):
		raise TypeError("header must be a byte sequence or an int")
	if isinstance(header, int):
		if header < 0 or header > 0xffffffff:
			raise errors.HeaderError("header value out of range")
		return header
	
	if len(header) < mp3bits.HEADER_SIZE:
		raise errors.TooShort("need %d bytes for a header, got %d"
				% (mp3bits.HEADER_SIZE, len(header)))
	
	try:
		head = bytes(header[:mp3bits.HEADER_SIZE])
	except ValueError:
		raise errors.HeaderError("header bytes out of range")
	return struct.unpack('!I', head)[0]


def _check(bits):
	# the first failed check decides which error is reported
	if (bits >> 21) != mp3bits.SYNC_WORD:
		return errors.InvalidSync("invalid sync bits in header", bits)
	
	version = (bits >> 19) & 3
	if version == Version.RESERVED:
		return errors.InvalidVersion("reserved MPEG version", bits)
	elif version == Version.MPEG2_5:
		return errors.InvalidVersion("unofficial MPEG 2.5 version", bits)
	
	if ((bits >> 17) & 3) == Layer.RESERVED:
		return errors.InvalidLayer("reserved MPEG layer", bits)
	
	if ((bits >> 10) & 3) == 3:
		return errors.InvalidSampleRateIndex("reserved samplerate", bits)
	
	bitrate_index = (bits >> 12) & 0xf
	if bitrate_index == 0:
		return errors.InvalidBitrateIndex("free format bitrate", bits)
	elif bitrate_index == 15:
		return errors.InvalidBitrateIndex("reserved bitrate", bits)
	
	return None


class FrameHeader(object):
	"""FrameHeader(header) -> object

Parse an MPEG audio frame header.  'header' is a bytes-like object (or a
sequence of byte values) holding at least 4 bytes, of which only the first
4 are used; or the header as a 32-bit integer.

Raises a subclass of errors.HeaderError (a ValueError) if the data isn't a
usable header: TooShort, InvalidSync, InvalidVersion, InvalidLayer,
InvalidSampleRateIndex or InvalidBitrateIndex.  MPEG 2.5 headers are always
rejected.  FrameHeader objects can't be modified once created.

Derived values (sample_rate, bitrate, frame_size, samples_per_frame,
duration) are computed when accessed, and are None if unavailable."""
	
	__slots__ = ('_header_bits',)
	
	def __init__(self, header):
		bits = _unpack(header)
		err = _check(bits)
		if err is not None:
			log.debug("rejected frame header: %s", err)
			raise err
		
		object.__setattr__(self, '_header_bits', bits)
	
	@classmethod
	def from_int(cls, value):
		"""from_int(value) -> FrameHeader

Parse a header given as a 32-bit unsigned integer."""
		return cls(int(value))
	
	def __setattr__(self, name, value):
		raise TypeError("object is immutable")
	
	def __delattr__(self, name):
		raise TypeError("object is immutable")
	
	def __reduce__(self):
		return (FrameHeader.from_int, (self._header_bits,))
	
	def __int__(self): return self._header_bits
	def __hash__(self): return hash(self._header_bits)
	
	def __eq__(self, other):
		if not isinstance(other, FrameHeader):
			return NotImplemented
		return self._header_bits == other._header_bits
	
	header_bits = property(lambda self: self._header_bits,
			doc="The header as a 32-bit integer.")
	raw_data = property(lambda self: struct.pack('!I', self._header_bits),
			doc="The 4 header bytes.")
	
	sync_word = _bitfield(21, 0x7ff)
	version_index = _bitfield(19, 0x3)
	layer_index = _bitfield(17, 0x3)
	protection_bit = _bitfield(16, 0x1)
	bitrate_index = _bitfield(12, 0xf)
	samplerate_index = _bitfield(10, 0x3)
	padded = _flag(9)
	private = _flag(8)
	channel_mode_index = _bitfield(6, 0x3)
	mode_extension = _bitfield(4, 0x3)
	copyrighted = _flag(3)
	original = _flag(2)
	emphasis = _bitfield(0, 0x3)
	
	version = property(lambda self: Version(self.version_index))
	layer = property(lambda self: Layer(self.layer_index))
	channel_mode = property(lambda self: ChannelMode(self.channel_mode_index))
	
	# a cleared protection bit means a 16-bit CRC follows the header
	is_protected = property(lambda self: self.protection_bit == 0)
	
	sample_rate = property(lambda self: mp3bits.samplerate(
			self.version_index, self.samplerate_index),
			doc="Samples per second (per channel), in Hz; or None.")
	bitrate = property(lambda self: mp3bits.bitrate(self.version_index,
			self.layer_index, self.bitrate_index),
			doc="Bitrate in kbps; or None.")
	frame_size = property(lambda self: mp3bits.frame_size(
			self.version_index, self.layer_index, self.bitrate_index,
			self.samplerate_index, self.padded),
			doc="Total frame size in bytes (header included); or None.")
	samples_per_frame = property(lambda self: mp3bits.samples_per_frame(
			self.version_index, self.layer_index))
	
	@property
	def duration(self):
		"Playing time of one frame, in seconds; or None."
		spf = self.samples_per_frame
		sr = self.sample_rate
		if spf is None or sr is None:
			return None
		return spf / sr
	
	_field_names = ('sync_word', 'version', 'layer', 'is_protected',
			'bitrate_index', 'samplerate_index', 'padded', 'private',
			'channel_mode', 'mode_extension', 'copyrighted', 'original',
			'emphasis')
	
	def fields(self):
		"""fields() -> list of (name, value)

Return every header field, in the order they appear in the header."""
		return [ (name, getattr(self, name)) for name in self._field_names ]
	
	_raw_names = ('version_index', 'layer_index', 'protection_bit',
			'bitrate_index', 'samplerate_index', 'padded', 'private',
			'channel_mode_index', 'mode_extension', 'copyrighted',
			'original', 'emphasis')
	
	def _fieldstrs(self):
		ret = []
		for key in self._raw_names:
			val = int(getattr(self, key))
			if val != 0:
				ret.append('%s=%d' % (key, val))
		return ret
	
	def __repr__(self):
		return 'FrameHeader(' + ', '.join(self._fieldstrs()) + ')'
	
	def describe(self):
		"""describe() -> str

Return a multi-line, human readable report of the header fields and
derived values."""
		
		def known(val, fmt):
			if val is None: return 'unknown'
			return fmt % val
		
		def yesno(flag): return 'Yes' if flag else 'No'
		
		sr = self.sample_rate
		lines = [
			'--- MPEG Frame Header Details ---',
			'Raw Header Value: 0x%08X' % self._header_bits,
			'',
			'[Format]',
			'  Version:        %s' % self.version,
			'  Layer:          %s' % self.layer,
			'  Bitrate:        %s' % known(self.bitrate, '%d kbps'),
			'  Sample Rate:    %s' % known(
					sr and sr / 1000, '%g kHz'),
			'  Channel Mode:   %s' % self.channel_mode,
			'  Frame Size:     %s' % known(self.frame_size, '%d bytes'),
			'',
			'[Details]',
			'  Protection:     %s' % (
					'CRC enabled' if self.is_protected else 'No CRC'),
			'  Padding:        %s' % (
					'Yes (1 byte)' if self.padded else 'No'),
			'  Copyright:      %s' % yesno(self.copyrighted),
			'  Original:       %s' % yesno(self.original),
			'  Emphasis:       %d' % self.emphasis,
			'---------------------------------',
		]
		
		if self.channel_mode == ChannelMode.JOINT_STEREO:
			lines.append('  Mode Extension:   %d (Intensity Stereo/MS Coding)'
					% self.mode_extension)
		
		return '\n'.join(lines)
	
	__str__ = describe

del _bitfield, _flag


def parse_header(data):
	"""parse_header(data) -> FrameHeader

Parse the first 4 bytes of 'data'; raises errors.HeaderError on failure."""
	return FrameHeader(data)


def probe_header(data):
	"""probe_header(data) -> FrameHeader or None

Like parse_header, but return None instead of raising errors.HeaderError."""
	try:
		return FrameHeader(data)
	except errors.HeaderError:
		return None


def check_header(data):
	"""check_header(data) -> errors.HeaderError or None

Return the error parse_header would raise for 'data', or None if the data
holds a valid header."""
	try:
		FrameHeader(data)
	except errors.HeaderError as err:
		return err
	return None
