"""Desugar range shorthand into plain comparator chains.

Supported expressions:
- hyphen ranges ``1.2.3 - 2.3.4`` → ``>=1.2.3 <=2.3.4``
- caret ranges ``^x.y.z`` → bump at the first non-zero part
- tilde ranges ``~x.y.z`` → ``>=x.y.z <x.(y+1).0``
- x-ranges ``1.x``, ``1.2.*``, ``>1.x`` → explicit bounds
- stars ``*`` → removed (an empty comparator means any version)

Every function here is a pure ``str -> str`` pass; the caller splits the
result on whitespace and parses each token as a comparator.
"""

from __future__ import annotations

import logging
import re

from .grammar import CARET, HYPHEN_RANGE, STAR, TILDE, WHITESPACE, XRANGE

logger = logging.getLogger(__name__)


def is_x(identifier: str | None) -> bool:
    return not identifier or identifier.lower() == "x" or identifier == "*"


def _rewrite_tokens(comp: str, rewrite) -> str:
    return " ".join(rewrite(token) for token in WHITESPACE.split(comp.strip()))


def _rewrite_anchored(pattern: re.Pattern[str], comp: str, build) -> str:
    match = pattern.fullmatch(comp)
    if not match:
        return comp
    return build(match)


def replace_hyphen_range(range_: str) -> str:
    """Rewrite ``A - B`` into ``>=A <=B``.

    1.2 - 3.4.5 → >=1.2.0 <=3.4.5
    1.2.3 - 3.4 → >=1.2.3 <3.5.0 (any 3.4.x will do)
    """

    def build(match: re.Match[str]) -> str:
        (
            from_, f_major, f_minor, f_patch, _f_pre, _f_build,
            to, t_major, t_minor, t_patch, t_pre, _t_build,
        ) = match.groups()

        if is_x(f_major):
            from_ = ""
        elif is_x(f_minor):
            from_ = f">={f_major}.0.0"
        elif is_x(f_patch):
            from_ = f">={f_major}.{f_minor}.0"
        else:
            from_ = f">={from_}"

        if is_x(t_major):
            to = ""
        elif is_x(t_minor):
            to = f"<{int(t_major) + 1}.0.0"
        elif is_x(t_patch):
            to = f"<{t_major}.{int(t_minor) + 1}.0"
        elif t_pre:
            to = f"<={t_major}.{t_minor}.{t_patch}-{t_pre}"
        else:
            to = f"<={to}"

        return f"{from_} {to}".strip()

    result = _rewrite_anchored(HYPHEN_RANGE, range_, build)
    logger.debug("hyphen replace %s -> %s", range_, result)
    return result


def replace_tilde(comp: str) -> str:
    """~*, ~>* → any
    ~2, ~2.x, ~2.x.x, ~>2 → >=2.0.0 <3.0.0
    ~1.2, ~1.2.x, ~>1.2 → >=1.2.0 <1.3.0
    ~1.2.3, ~>1.2.3 → >=1.2.3 <1.3.0
    """

    def build(match: re.Match[str]) -> str:
        major, minor, patch, pre = match.group(1, 2, 3, 4)
        if is_x(major):
            return ""
        if is_x(minor):
            return f">={major}.0.0 <{int(major) + 1}.0.0"
        if is_x(patch):
            return f">={major}.{minor}.0 <{major}.{int(minor) + 1}.0"
        if pre:
            return f">={major}.{minor}.{patch}-{pre} <{major}.{int(minor) + 1}.0"
        return f">={major}.{minor}.{patch} <{major}.{int(minor) + 1}.0"

    result = _rewrite_anchored(TILDE, comp, build)
    logger.debug("tilde %s -> %s", comp, result)
    return result


def replace_tildes(comp: str) -> str:
    return _rewrite_tokens(comp, replace_tilde)


def replace_caret(comp: str) -> str:
    """^*, ^x → any
    ^2, ^2.x, ^2.x.x, ^2.0 → >=2.0.0 <3.0.0
    ^1.2, ^1.2.x, ^1.2.3 → >=1.2.x <2.0.0
    ^0.2.3 → >=0.2.3 <0.3.0
    ^0.0.3 → >=0.0.3 <0.0.4
    """

    def build(match: re.Match[str]) -> str:
        major, minor, patch, pre = match.group(1, 2, 3, 4)
        if is_x(major):
            return ""
        if is_x(minor):
            return f">={major}.0.0 <{int(major) + 1}.0.0"
        if is_x(patch):
            if major == "0":
                return f">={major}.{minor}.0 <{major}.{int(minor) + 1}.0"
            return f">={major}.{minor}.0 <{int(major) + 1}.0.0"

        lower = f">={major}.{minor}.{patch}"
        if pre:
            lower += f"-{pre}"
        if major == "0":
            if minor == "0":
                return f"{lower} <{major}.{minor}.{int(patch) + 1}"
            return f"{lower} <{major}.{int(minor) + 1}.0"
        return f"{lower} <{int(major) + 1}.0.0"

    result = _rewrite_anchored(CARET, comp, build)
    logger.debug("caret %s -> %s", comp, result)
    return result


def replace_carets(comp: str) -> str:
    return _rewrite_tokens(comp, replace_caret)


def replace_x_range(comp: str) -> str:
    comp = comp.strip()

    def build(match: re.Match[str]) -> str:
        gtlt, major, minor, patch = match.group(1, 2, 3, 4)
        x_major = is_x(major)
        x_minor = x_major or is_x(minor)
        any_x = x_minor or is_x(patch)

        if gtlt == "=" and any_x:
            gtlt = ""

        if x_major:
            if gtlt in (">", "<"):
                # nothing is allowed
                return "<0.0.0"
            # nothing is forbidden
            return "*"

        if gtlt and any_x:
            # patch is an x here; replace the x parts with 0
            major_n = int(major)
            minor_n = 0 if x_minor else int(minor)
            patch_n = 0
            if gtlt == ">":
                # >1 → >=2.0.0, >1.2 → >=1.3.0
                gtlt = ">="
                if x_minor:
                    major_n += 1
                    minor_n = 0
                else:
                    minor_n += 1
            elif gtlt == "<=":
                # <=0.7.x is really <0.8.0 since any 0.7.x should pass
                gtlt = "<"
                if x_minor:
                    major_n += 1
                else:
                    minor_n += 1
            return f"{gtlt}{major_n}.{minor_n}.{patch_n}"

        if x_minor:
            return f">={major}.0.0 <{int(major) + 1}.0.0"
        if any_x:
            return f">={major}.{minor}.0 <{major}.{int(minor) + 1}.0"
        return match.group(0)

    result = _rewrite_anchored(XRANGE, comp, build)
    logger.debug("xrange %s -> %s", comp, result)
    return result


def replace_x_ranges(comp: str) -> str:
    return _rewrite_tokens(comp, replace_x_range)


def replace_stars(comp: str) -> str:
    """Drop ``*`` tokens: they are ANDed with the rest, and "" already means any."""
    return STAR.sub("", comp.strip(), count=1)


def parse_comparator(comp: str) -> str:
    """Run every shorthand pass over a single whitespace-free token."""
    logger.debug("comp %s", comp)
    comp = replace_carets(comp)
    comp = replace_tildes(comp)
    comp = replace_x_ranges(comp)
    comp = replace_stars(comp)
    logger.debug("stars %s", comp)
    return comp
