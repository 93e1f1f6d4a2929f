# This file is part of logcollector, an in-memory line collector for log output.
# Copyright 2018 Patrick Plagwitz
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from logcollector.exceptions import UnsupportedChunkException

DefaultEncoding = "utf-8"
DecodingErrors = "replace"

def decodeChunk(chunk, encoding):
  if isinstance(chunk, str):
    return chunk
  if isinstance(chunk, (bytes, bytearray, memoryview)):
    return bytes(chunk).decode(encoding, errors=DecodingErrors)
  raise UnsupportedChunkException(chunk)

def chunkLength(chunk):
  if isinstance(chunk, memoryview):
    return chunk.nbytes
  return len(chunk)

class LineBufferedLogger(object):
  def __init__(self, encoding=DefaultEncoding):
    self.encoding = encoding
    self.__buffer = ""

  @property
  def pending(self):
    return self.__buffer

  def write(self, chunk, **kwargs):
    lines = decodeChunk(chunk, self.encoding).split("\n")
    for i, line in enumerate(lines[:-1]):
      if i == 0:
        line = self.__buffer + line
      self.writeLine(line)

    if len(lines) > 1:
      self.__buffer = ""
    self.__buffer += lines[-1]

    return chunkLength(chunk)

  def flush(self):
    if len(self.__buffer) > 0:
      line = self.__buffer
      self.__buffer = ""
      self.writeLine(line)

  def clearPending(self):
    self.__buffer = ""

  def writable(self):
    return True

  def close(self):
    self.flush()

  def __enter__(self):
    return self
  def __exit__(self, exceptionType, ex, traceback):
    self.close()
