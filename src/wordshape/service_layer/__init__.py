"""Service layer for WORDSHAPE.

Application services that own state injected from the composition root: the
`StringShaper` (case transformations with a memoized dasherize) and the
`Localizer` facade (locale lookup followed by formatting).
"""
