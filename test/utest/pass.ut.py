#!/usr/bin/env python3

from utest import utest, utest_call, utest_exc, utest_seq, utest_val


utest(True, lambda: True)
utest(True, lambda b: b, True)

def raise_expected(*args): raise Exception('expected')

utest_exc(Exception('expected'), raise_expected)
utest_exc("Exception('expected')", raise_expected)
utest_exc(Exception, raise_expected)

utest_seq([0, 1], range, 2)
utest_seq([], iter, ())

utest_val(True, True, 'boolean test')
utest_val((0,1), (0,1), 'tuple test')

calls = []

@utest_call
def called_immediately() -> None:
  calls.append(1)

utest_val([1], calls, 'utest_call calls the function once')
