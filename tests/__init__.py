"""WORDSHAPE test suite.

Layout
- unit/      : one module at a time; fakes stand in for collaborators.
- contract/  : behavior every implementation of an interface must share.
- e2e/       : the `wordshape` CLI driven through click's CliRunner.
- helpers/   : shared utilities (no tests here).

Each tree's conftest adds its default mark (unit, contract, e2e). Hypothesis
tests also carry @pytest.mark.property.
"""
