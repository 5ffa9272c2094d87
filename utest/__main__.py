#!/usr/bin/env python3
# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from argparse import ArgumentParser
from os import environ, getcwd, pathsep
from pathlib import Path
from subprocess import run
from sys import executable


def main() -> None:
  arg_parser = ArgumentParser(description='Find and run utest unit tests with the extension ".ut.py", defaulting to "test/".')
  arg_parser.add_argument('paths', nargs='*', default=['test'])
  args = arg_parser.parse_args()

  env = dict(environ)
  env.setdefault('UTEST_WORK_DIR', getcwd())
  # Make packages in the work dir importable by the test scripts without installation.
  env['PYTHONPATH'] = pathsep.join(p for p in (env['UTEST_WORK_DIR'], environ.get('PYTHONPATH')) if p)

  ok = True
  for path in sorted(find_tests(args.paths)):
    print(path)
    # Each test runs in a separate interpreter because utest reports failures at process exit.
    c = run([executable, str(path)], env=env).returncode
    if c != 0:
      ok = False
      print()

  exit(0 if ok else 1)


def find_tests(paths:list[str]) -> list[Path]:
  tests:list[Path] = []
  for p in map(Path, paths):
    if p.is_dir(): tests.extend(p.rglob('*.ut.py'))
    else: tests.append(p)
  return tests


if __name__ == '__main__': main()
