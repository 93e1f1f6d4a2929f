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

import threading
from contextlib import contextmanager
from logcollector.linecollector import LineCollector

class SharedLineCollector(object):
  def __init__(self, collector=None, lock=None):
    self.collector = collector if collector is not None else LineCollector()
    self._mutex = lock if lock is not None else threading.Lock()

  @contextmanager
  def lock(self):
    with self._mutex:
      yield self.collector

  def _locked(funcName):
    def call(self, *args, **kwargs):
      with self.lock() as collector:
        return getattr(collector, funcName)(*args, **kwargs)
    call.__name__ = funcName
    return call

  write = _locked("write")
  flush = _locked("flush")
  close = _locked("close")
  clear = _locked("clear")
  count = _locked("count")
  lines = _locked("lines")
  cloneLines = _locked("cloneLines")
  del _locked

  def writable(self):
    return True

  def __enter__(self):
    return self
  def __exit__(self, exceptionType, ex, traceback):
    self.close()
