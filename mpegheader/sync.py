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
A frame scanner that splits a stream of MPEG audio data into frames.

The scanner keeps its own buffer.  Whenever the data at the front of the
buffer isn't a valid frame header, it drops one byte and tries again, so
ID3 tags and other garbage between frames are skipped."""

import logging
from . import mp3bits, errors
from .frames import probe_header


log = logging.getLogger(__name__)

default_bufsize = 65536
default_max_buffer = 4*1024*1024


class Frame(object):
	"""Frame(header, data, byte_position, frame_number, resynced) -> object

A physical MPEG audio frame found by FrameScanner.
Fields:
  header - a FrameHeader instance
  data - the frame bytes, starting with the 4-byte header
  byte_position - the number of stream bytes that preceded the header
  frame_number - a generated sequence number for the frame (0-based)
  resynced - True if any bytes were skipped before this frame,
             False if the frame was found as expected
"""
	
	__slots__ = ('header', 'data', 'byte_position', 'frame_number',
			'resynced')
	
	def __init__(self, header, data, byte_position, frame_number, resynced):
		self.header = header
		self.data = data
		self.byte_position = byte_position
		self.frame_number = frame_number
		self.resynced = resynced
	
	def __len__(self):
		return len(self.data)
	
	def __repr__(self):
		return 'Frame(#%d at %d, %d bytes, %r)' % (self.frame_number,
				self.byte_position, len(self.data), self.header)


class FrameScanner(object):
	"""FrameScanner(source=None, bufsize=None, max_buffer=None) -> object

Return an object that locates frame headers in MPEG audio data and returns
the frames one at a time.  Data is either pushed with feed() and close(),
or pulled from 'source' (a binary file object) in chunks of 'bufsize'
bytes.  Iterating over the scanner yields every frame in the source."""
	
	def __init__(self, source=None, bufsize=None, max_buffer=None):
		self.source = source
		self.bufsize = bufsize or default_bufsize
		self.max_buffer = max_buffer or default_max_buffer
		
		self.data = bytearray()
		self.read_eof = False
		
		# stream offset of self.data[0]
		self.bytes_returned = 0
		self.bytes_skipped = 0
		self.frames_returned = 0
		
		# False once bytes have been skipped since the last frame
		self.synced = True
		self._skip_run = 0
	
	done = property(lambda s: s.read_eof and not len(s.data),
			doc="True if all input data has been processed.")
	
	def feed(self, data):
		"""feed(data) -> None

Append some bytes to the internal buffer."""
		
		if self.read_eof:
			raise errors.MP3UsageError('tried to write data after EOF')
		self.data.extend(data)
	
	def close(self):
		"""close() -> None

Mark the end of the input; a truncated frame at the end of the buffer
will be discarded instead of waiting for more data."""
		self.read_eof = True
	
	def fromfile(self, file=None, bytes=None):
		"""fromfile([file, bytes]) -> None

Read some data from the given file (default: the source) into the
internal buffer, and call close() at the end of the file."""
		
		file = file or self.source
		if file is None:
			raise errors.MP3UsageError('no source file to read from')
		
		chunk = file.read(bytes or self.bufsize)
		if chunk:
			self.feed(chunk)
		else:
			self.close()
	
	def _skip(self, count):
		if not count: return
		del self.data[:count]
		self.bytes_returned += count
		self.bytes_skipped += count
		self._skip_run += count
		self.synced = False
	
	def readframe(self):
		"""readframe() -> Frame or None

Remove the next frame from the internal buffer and return it, skipping
any data that isn't a frame.  Returns None if more data is needed, or if
the input is exhausted."""
		
		d = self.data
		while 1:
			pos = d.find(0xff)
			if pos < 0:
				# no possible header
				self._skip(len(d))
				return None
			elif pos > 0:
				self._skip(pos)
			
			if len(d) < mp3bits.HEADER_SIZE:
				if self.read_eof:
					log.debug("discarding %d trailing bytes at offset %d",
							len(d), self.bytes_returned)
					self._skip(len(d))
				return None
			
			head = probe_header(d)
			size = head.frame_size if head is not None else None
			if not size:
				# not a valid frame, skip 1 byte and try again
				self._skip(1)
				continue
			
			if len(d) < size:
				if not self.read_eof:
					return None
				
				# can't be a real frame if the stream ends first
				log.debug("header at offset %d claims %d bytes, only %d left",
						self.bytes_returned, size, len(d))
				self._skip(1)
				continue
			
			return self._take_frame(head, size)
	
	def _take_frame(self, head, size):
		if self._skip_run:
			log.debug("resynced at offset %d after skipping %d bytes",
					self.bytes_returned, self._skip_run)
			self._skip_run = 0
		
		fr = Frame(head, bytes(self.data[:size]), self.bytes_returned,
				self.frames_returned, not self.synced)
		
		del self.data[:size]
		self.bytes_returned += size
		self.frames_returned += 1
		self.synced = True
		return fr
	
	def frames(self):
		"""frames() -> generator

Return a generator that repeatedly calls readframe, reading more data
from the source as needed.  Without a source it stops when the buffered
data runs out.  This can be used as:
  for frame in scanner.frames(): ..."""
		
		while 1:
			fr = self.readframe()
			if fr is not None:
				yield fr
				continue
			
			if self.read_eof or self.source is None:
				break
			if len(self.data) >= self.max_buffer:
				raise errors.MP3ImplementationLimit(
						'sync buffer reached maximum size')
			
			self.fromfile()
	
	def __iter__(self):
		return self.frames()
