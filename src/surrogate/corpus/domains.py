"""Email domain corpus.

A mix of large consumer mail providers and short regional domains.  The short
entries matter: they keep email generation feasible for small length budgets.
Every domain is lowercase ASCII.
"""

from __future__ import annotations

__all__ = ["EMAIL_DOMAINS"]

EMAIL_DOMAINS: tuple[str, ...] = (
    "qq.com",
    "gmx.de",
    "me.com",
    "ya.ru",
    "web.de",
    "aol.com",
    "mail.ru",
    "mac.com",
    "msn.com",
    "free.fr",
    "live.com",
    "gmx.net",
    "mail.com",
    "proton.me",
    "gmail.com",
    "yahoo.com",
    "email.com",
    "yandex.ru",
    "icloud.com",
    "inbox.com",
    "zoho.com",
    "orange.fr",
    "libero.it",
    "hotmail.com",
    "outlook.com",
    "comcast.net",
    "verizon.net",
    "fastmail.com",
    "hotmail.co.uk",
    "protonmail.com",
    "yahoo.co.uk",
    "btinternet.com",
    "sbcglobal.net",
    "rocketmail.com",
    "googlemail.com",
    "optonline.net",
)
