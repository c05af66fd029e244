'''
Debugging aids.  When the debug flag is on, exception messages get the
name of the raising function and its line number prepended, and the
approximators report what they did on stderr.

Copyright (c) 2009, Don Peterson
Copyright (c) 2011, Vernon Mauery
All rights reserved.

Redistribution and use in source and binary forms, with or
without modification, are permitted provided that the following
conditions are met:

* Redistributions of source code must retain the above copyright
notice, this list of conditions and the following disclaimer.
* Redistributions in binary form must reproduce the above
copyright notice, this list of conditions and the following
disclaimer in the documentation and/or other materials provided
with the distribution.
* The names of the contributors may not be used to endorse or
promote products derived from this software without specific
prior written permission.

THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS
"AS IS" AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT
LIMITED TO, THE IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR
A PARTICULAR PURPOSE ARE DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT
OWNER OR CONTRIBUTORS BE LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL,
SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT
LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR SERVICES; LOSS OF USE,
DATA, OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER CAUSED AND ON ANY
THEORY OF LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY, OR TORT
(INCLUDING NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE
OF THIS SOFTWARE, EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.
'''

import sys

debug_flag = False  # Turn on to enable file:linenumbers in exceptions
stream = None       # Where trace() writes; None means sys.stderr

def _where(depth):
    co = sys._getframe(depth + 1)
    return "[%s:%d] " % (co.f_code.co_name, co.f_lineno)

def fln():
    'Return a string showing the function and line number if debug is on.'
    if debug_flag:
        return _where(1)
    return ""

def trace(msg):
    '''Write msg, tagged with the caller's function and line number, to
    the trace stream.  Does nothing unless debugging is on.
    '''
    if debug_flag:
        (stream or sys.stderr).write(_where(1) + msg + "\n")

def debug(state=None):
    global debug_flag
    if state is not None:
        debug_flag = not (not state)
    return debug_flag
