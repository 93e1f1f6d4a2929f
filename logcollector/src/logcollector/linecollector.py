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

from logcollector.linebufferedlogger import LineBufferedLogger, \
    DefaultEncoding

class LineCollector(LineBufferedLogger):
  def __init__(self, encoding=DefaultEncoding):
    super().__init__(encoding)
    self._lines = []

  @classmethod
  def newShared(cls, encoding=DefaultEncoding):
    from logcollector.sharedlinecollector import SharedLineCollector
    return SharedLineCollector(cls(encoding))

  def writeLine(self, line):
    self._lines.append(line)

  def clear(self):
    self._lines = []
    self.clearPending()

  def count(self):
    return len(self._lines)

  def lines(self):
    return tuple(self._lines)

  def cloneLines(self):
    return list(self._lines)

  def __repr__(self):
    return "LineCollector({0}, pending={1})".format(
        repr(self._lines), repr(self.pending))
