"""
Rule engine: evaluates declarative rules against a customer profile and a
sequence of business events.

Modules
-------
paths      : resolve_path() — dotted-path lookup into the evaluation context.
conditions : build_context() + check_condition() + conditions_met()
             — pure functions, no I/O.
effects    : EffectResult dataclass + apply_effect() — copy-on-write
             profile mutation with a trace description.
evaluator  : evaluate_rules() — priority ordering, event matching, trace.
"""
