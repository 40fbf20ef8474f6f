# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
from suffixarray.errors import Cancelled, InvalidArgument, InvalidInput
from suffixarray.index import SuffixArray, construct
