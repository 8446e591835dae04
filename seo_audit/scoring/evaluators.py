"""Criterion evaluation strategies, one per CriterionKind.

Tag-based strategies match the raw content with case-insensitive, dot-all
regular expressions. Matches are not DOM-aware: a tag inside an HTML comment
or a script string is found like any other.
"""

from seo_audit.scoring.base import BaseEvaluator, EvaluationContext
from seo_audit.scoring.models import CriterionResult, CriterionSpec


class TagLengthEvaluator(BaseEvaluator):
    """Passes when the first captured tag value has an acceptable length."""

    def evaluate(self, context: EvaluationContext, spec: CriterionSpec) -> CriterionResult:
        match = spec.compiled_pattern.search(context.content)
        if match is None:
            return self._failed(spec, "Not found.")
        value = (match.group(1) if match.groups() else match.group(0)).strip()
        length = len(value)
        if length < spec.min_length:
            return self._failed(
                spec,
                f"Too short ({length} characters). "
                f"Minimum {spec.min_length} characters required.",
            )
        if length > spec.max_length:
            return self._failed(
                spec,
                f"Too long ({length} characters). "
                f"Maximum {spec.max_length} characters allowed.",
            )
        return self._passed(
            spec,
            f"Found and within the ideal length ({length} characters). (Value: {value})",
        )


class MaxCountTagEvaluator(BaseEvaluator):
    """Passes when the tag occurs at least once and at most max_count times."""

    def evaluate(self, context: EvaluationContext, spec: CriterionSpec) -> CriterionResult:
        matches = list(spec.compiled_pattern.finditer(context.content))
        count = len(matches)
        if count == 0:
            return self._failed(spec, f"No {spec.label} tag was found.")
        if count > spec.max_count:
            return self._failed(
                spec,
                f"Multiple {spec.label} tags found ({count}). This is not recommended.",
            )
        first = matches[0]
        heading = (first.group(1) if first.groups() else first.group(0)).strip()
        if count == 1:
            return self._passed(spec, f"A single {spec.label} tag was found. (Text: {heading})")
        return self._passed(spec, f"{count} {spec.label} tags found. (First: {heading})")


class MinCountTagEvaluator(BaseEvaluator):
    """Passes when the tag occurs at least min_count times."""

    def evaluate(self, context: EvaluationContext, spec: CriterionSpec) -> CriterionResult:
        count = len(spec.compiled_pattern.findall(context.content))
        if count >= spec.min_count:
            return self._passed(
                spec,
                f"At least {spec.min_count} {spec.label} found ({count} detected).",
            )
        if count == 0:
            return self._failed(spec, f"No {spec.label} were found.")
        return self._failed(
            spec,
            f"Only {count} {spec.label} found (Minimum: {spec.min_count}).",
        )


class PresenceTagEvaluator(BaseEvaluator):
    """Passes when the pattern matches at least once."""

    def evaluate(self, context: EvaluationContext, spec: CriterionSpec) -> CriterionResult:
        if spec.compiled_pattern.search(context.content) is not None:
            return self._passed(spec, "Found.")
        return self._failed(spec, "Not found.")


class WordCountEvaluator(BaseEvaluator):
    """Passes when the document has at least min_words words."""

    def evaluate(self, context: EvaluationContext, spec: CriterionSpec) -> CriterionResult:
        word_count = context.text.word_count
        if word_count >= spec.min_words:
            return self._passed(spec, f"Content is of sufficient length ({word_count} words).")
        return self._failed(
            spec,
            f"Content is too short: Only {word_count} words (Minimum: {spec.min_words}).",
        )


class KeywordDensityEvaluator(BaseEvaluator):
    """Passes when keyword occurrences per 100 words fall within the range."""

    def evaluate(self, context: EvaluationContext, spec: CriterionSpec) -> CriterionResult:
        keyword = context.keyword
        keyword_count = context.text.plain_text.lower().count(keyword.lower())
        word_count = context.text.word_count
        density = keyword_count / word_count * 100 if word_count > 0 else 0.0

        if spec.min_density <= density <= spec.max_density:
            return self._passed(
                spec,
                f"Density is within the ideal range: {round(density, 2)}% "
                f"({keyword_count} occurrences).",
            )

        message = f"Density is outside the ideal range: {round(density, 2)}%. "
        # Both checks are independent; only one can hold when min <= max.
        if density < spec.min_density:
            message += f"Too low. Use the keyword '{keyword}' more frequently."
        if density > spec.max_density:
            message += "Too high (potential keyword stuffing). Reduce density."
        return self._failed(spec, message)
