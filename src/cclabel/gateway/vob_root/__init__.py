"""VOB root resolution gateway.

Import from submodules:
- abc: VobRootResolver
- real: ProbingVobRootResolver
- fake: FakeVobRootResolver
"""
