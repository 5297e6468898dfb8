"""
Before/after profile comparison.

``diff_profiles(before, after)`` lines up every score that appears in either
profile (absent scores read as 0) and classifies tags as added, removed or
unchanged. Key order follows ``before`` first, then anything new in
``after``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from rule_studio.models.profile import Number, Profile


@dataclass
class ScoreChange:
    """One score's before/after values."""

    name:   str
    before: Number
    after:  Number

    @property
    def delta(self) -> Number:
        return self.after - self.before

    @property
    def changed(self) -> bool:
        return self.delta != 0


@dataclass
class ProfileDiff:
    """Score and tag differences between two profile snapshots."""

    scores:         list[ScoreChange] = field(default_factory=list)
    added_tags:     list[str] = field(default_factory=list)
    removed_tags:   list[str] = field(default_factory=list)
    unchanged_tags: list[str] = field(default_factory=list)

    @property
    def changed_scores(self) -> list[ScoreChange]:
        return [s for s in self.scores if s.changed]

    @property
    def is_empty(self) -> bool:
        return not self.changed_scores and not self.added_tags and not self.removed_tags


def diff_profiles(before: Profile, after: Profile) -> ProfileDiff:
    """Compare two profile snapshots.

    Args:
        before: Profile prior to evaluation.
        after:  Profile after evaluation.

    Returns:
        ProfileDiff covering the union of score names and tags.
    """
    names = list(dict.fromkeys([*before.scores, *after.scores]))
    scores = [ScoreChange(name, before.score(name), after.score(name)) for name in names]

    diff = ProfileDiff(scores=scores)
    for tag in dict.fromkeys([*before.tags, *after.tags]):
        was_present = before.has_tag(tag)
        is_present  = after.has_tag(tag)
        if is_present and not was_present:
            diff.added_tags.append(tag)
        elif was_present and not is_present:
            diff.removed_tags.append(tag)
        else:
            diff.unchanged_tags.append(tag)
    return diff
