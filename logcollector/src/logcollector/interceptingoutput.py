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

import sys

class InterceptingOutput(object):
  @classmethod
  def stderr(clazz, sink):
    def setStderr(newFile):
      sys.stderr = newFile
    return clazz(lambda: sys.stderr, setStderr, sink)
  @classmethod
  def stdout(clazz, sink):
    def setStdout(newFile):
      sys.stdout = newFile
    return clazz(lambda: sys.stdout, setStdout, sink)

  def __init__(self, getter, setter, sink):
    self.getter = getter
    self.setter = setter
    self.sink = sink
    self.originalFile = None

  def __enter__(self):
    self.originalFile = self.getter()
    if self.originalFile is not None:
      self.originalFile.flush()
    self.setter(self.sink)
    return self.sink

  def __exit__(self, exceptionType, ex, traceback):
    try:
      self.sink.flush()
    finally:
      self.setter(self.originalFile)
