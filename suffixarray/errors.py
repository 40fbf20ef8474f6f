# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
#
# Errors raised when constructing an index.

class InvalidArgument(ValueError):
    pass

class InvalidInput(TypeError):
    pass

class Cancelled(RuntimeError):
    pass

def check_cancel(cancel):
    if cancel is not None and cancel():
        raise Cancelled('Suffix array construction cancelled!')
