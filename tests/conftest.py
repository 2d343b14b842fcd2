"""Shared fixtures: a small public suffix list with real-world rules."""

from __future__ import annotations

import pytest

from regdom.registered import RegisteredDomain
from regdom.suffix import PublicSuffixList

PSL_TEXT = """\
// This Source Code Form is subject to the terms of the Mozilla Public
// License, v. 2.0.

// ===BEGIN ICANN DOMAINS===

// ck
*.ck
!www.ck

// cn
cn
com.cn
公司.cn

// com, net, org
com
net
org

// de
de

// jp
jp
co.jp
*.kawasaki.jp
!city.kawasaki.jp
*.kobe.jp
!city.kobe.jp

// uk
uk
co.uk
ac.uk

// ===END ICANN DOMAINS===
// ===BEGIN PRIVATE DOMAINS===

blogspot.com
github.io

// ===END PRIVATE DOMAINS===
"""


@pytest.fixture
def psl_text() -> str:
    return PSL_TEXT


@pytest.fixture
def psl() -> PublicSuffixList:
    return PublicSuffixList.from_text(PSL_TEXT)


@pytest.fixture
def regdom(psl: PublicSuffixList) -> RegisteredDomain:
    return RegisteredDomain(psl)
