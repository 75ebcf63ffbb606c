"""Email address generator.

Addresses take the form ``local@domain``.  The domain always comes from the
email domain corpus; the local part is either a UUIDv4 hex string or a
lowercase ``firstlast`` name.  The ``@`` plus at least one character on each
side means ``max_length`` must exceed 2 before anything is attempted.

Budget split for ``fullname`` addresses: the richest local-part stage whose
minimum length still leaves room for the shortest domain is picked first, and
the domain ceiling is whatever that stage does not need.  Picking the stage
before sampling the domain keeps the result monotonic: shrinking
``max_length`` can only move the local part down the name fallback chain.
"""

from __future__ import annotations

import uuid

from surrogate.corpus import EMAIL_DOMAIN, get_corpus
from surrogate.utils.constants import strip_special
from surrogate.utils.errors import LengthInfeasibleError

from .base import degrade, require_budget
from .names import compose_name, name_floors
from .request import EmailOptions, GeneratedValue, GenerationRequest, Stage
from .sampler import pad_to, sample
from .seed import Randomizer

__all__ = ["UUID_EMAIL", "FULLNAME_EMAIL", "ANY_EMAIL", "generate_email"]

UUID_EMAIL = "uuidv4"
FULLNAME_EMAIL = "fullname"
ANY_EMAIL = "any"

DOMAINS = get_corpus(EMAIL_DOMAIN)


def _uuid_local(rng: Randomizer) -> str:
    return uuid.UUID(int=rng.getrandbits(128), version=4).hex


def _uuid_email(
    request: GenerationRequest, rng: Randomizer, excluded: frozenset[str]
) -> tuple[str, str, Stage]:
    domain = sample(DOMAINS, request.max_length - 2, rng, excluded)
    local = _uuid_local(rng)[: request.max_length - len(domain) - 1]
    return local, domain, Stage.FULL


def _fullname_email(
    request: GenerationRequest, rng: Randomizer, excluded: frozenset[str]
) -> tuple[str, str, Stage]:
    budget = request.max_length - 1
    for stage, floor in name_floors():
        if DOMAINS.index.fits(budget - floor):
            break
    else:
        raise LengthInfeasibleError(
            f"{request.kind.value}: no email domain fits within {request.max_length} characters"
        )
    if stage is not Stage.FULL:
        # Fail fast when fallback is disabled, before any draw.
        degrade(request, stage, budget)

    domain = sample(DOMAINS, budget - floor, rng, excluded)
    local, local_stage = compose_name(
        request, rng, budget - len(domain), separator="", excluded=request.excluded
    )
    local = strip_special(local).lower()
    return local, domain, local_stage


def generate_email(request: GenerationRequest, rng: Randomizer) -> GeneratedValue:
    """Return an email address no longer than ``request.max_length``.

    Raises
    ------
    LengthInfeasibleError
        ``max_length`` cannot hold ``x@`` plus the shortest domain.
    CorpusExhaustedError
        Every domain that fits is excluded.
    """

    require_budget(request, minimum=3)
    options = request.options
    assert isinstance(options, EmailOptions)

    email_type = options.email_type
    if email_type == ANY_EMAIL:
        email_type = (UUID_EMAIL, FULLNAME_EMAIL)[rng.intn(2)]

    excluded = request.excluded | {d.strip().lower() for d in options.excluded_domains}
    if email_type == UUID_EMAIL:
        local, domain, stage = _uuid_email(request, rng, excluded)
    else:
        local, domain, stage = _fullname_email(request, rng, excluded)

    if request.min_length is not None:
        local = pad_to(local, request.min_length - len(domain) - 1, rng)
    return GeneratedValue(
        value=f"{local}@{domain}", stage=stage, kind=request.kind, seed=rng.seed
    )
