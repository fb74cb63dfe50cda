"""Queries over company facts and single-concept time series.

Taxonomy, tag, unit and form strings are matched exactly as the API
reports them. Values are returned in delivery order; amendments and
restatements of the same period appear as separate entries.
"""

from collections.abc import Mapping, Sequence
from types import MappingProxyType

from edgar_client.models import CompanyConcept, CompanyFacts, ConceptValue, Fact

TaggedValue = tuple[str, str, ConceptValue]


def taxonomies(facts: CompanyFacts) -> set[str]:
    """Return the taxonomy names present, e.g. {"us-gaap", "dei"}."""
    return set(facts.facts)


def tags_for_taxonomy(facts: CompanyFacts, taxonomy: str) -> Mapping[str, Fact]:
    """Return a read-only tag -> fact view for a taxonomy, empty if it is absent."""
    return MappingProxyType(facts.facts.get(taxonomy, {}))


def get_fact(facts: CompanyFacts, taxonomy: str, tag: str) -> Fact | None:
    return tags_for_taxonomy(facts, taxonomy).get(tag)


def _iter_values(facts: CompanyFacts):
    for taxonomy, tags in facts.facts.items():
        for tag, fact in tags.items():
            for values in fact.units.values():
                for value in values:
                    yield taxonomy, tag, value


def facts_for_form(facts: CompanyFacts, form: str) -> list[TaggedValue]:
    """
    Find every value reported on a given form type.

    Args:
        facts: Company facts to scan
        form: Form code such as "10-K"; matched exactly and case-sensitively

    Returns:
        (taxonomy, tag, value) triples in taxonomy, tag and unit order
    """
    return [(taxonomy, tag, value) for taxonomy, tag, value in _iter_values(facts) if value.form == form]


def facts_for_fiscal_period(facts: CompanyFacts, fiscal_year: int, fiscal_period: str) -> list[TaggedValue]:
    """Find every value reported for a fiscal year and period such as (2023, "FY")."""
    return [
        (taxonomy, tag, value)
        for taxonomy, tag, value in _iter_values(facts)
        if value.fy == fiscal_year and value.fp == fiscal_period
    ]


def most_recent_value(facts: CompanyFacts, taxonomy: str, tag: str, unit: str) -> ConceptValue | None:
    """Return the value with the latest period end, or None if there is none."""
    fact = get_fact(facts, taxonomy, tag)
    if fact is None:
        return None
    return _latest(fact.units.get(unit, ()))


def _latest(values: Sequence[ConceptValue]) -> ConceptValue | None:
    # Of equal ends the last delivered wins, i.e. the restated value
    return max(reversed(values), key=lambda v: v.end, default=None)


def available_units(concept: CompanyConcept) -> list[str]:
    return list(concept.units)


def values_for_unit(concept: CompanyConcept, unit: str) -> tuple[ConceptValue, ...]:
    """Return the values reported in a unit, as delivered."""
    return concept.units.get(unit, ())


def concept_values_for_fiscal_period(
    concept: CompanyConcept, fiscal_year: int, fiscal_period: str
) -> list[tuple[str, ConceptValue]]:
    """Return (unit, value) pairs for a fiscal year and period."""
    return [
        (unit, value)
        for unit, values in concept.units.items()
        for value in values
        if value.fy == fiscal_year and value.fp == fiscal_period
    ]


def latest_concept_value(concept: CompanyConcept, unit: str) -> ConceptValue | None:
    return _latest(values_for_unit(concept, unit))
