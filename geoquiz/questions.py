"""Question templates: turn a country into a prompt and its expected answer."""

import random

from geoquiz.models import FACTS_PER_COUNTRY, CountryRecord, Question

CAPITAL_TO_COUNTRY = 0
COUNTRY_TO_CAPITAL = 1
FACT_TO_COUNTRY = 2

_TEMPLATE_COUNT = 3


def generate_question(country: CountryRecord, rng: random.Random) -> Question:
    """Build one question for ``country`` from a uniformly chosen template.

    Draws once from ``rng`` for the template, and a second time only when the
    fact template is chosen, to pick which fact is shown.
    """
    template = rng.randrange(_TEMPLATE_COUNT)

    if template == CAPITAL_TO_COUNTRY:
        return Question(
            prompt=f'Which country has the capital "{country.capital}"?',
            answer=country.name,
        )
    if template == COUNTRY_TO_CAPITAL:
        return Question(
            prompt=f'What is the capital city of "{country.name}"?',
            answer=country.capital,
        )

    fact = country.facts[rng.randrange(FACTS_PER_COUNTRY)]
    return Question(
        prompt=f"Which country matches this fact?\n{fact}",
        answer=country.name,
    )
