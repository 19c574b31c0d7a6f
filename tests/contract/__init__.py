"""Contract tests.

Each package parametrizes a fixture over the implementations of one interface
(`TransformCache`, `LocaleRegistry`, `Formatter`) and asserts only the public
behavior they must share, including under concurrent callers.
"""
