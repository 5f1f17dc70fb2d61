from __future__ import annotations

import pytest

from github_network.base.dto import OwnerDTO, RepositoryDTO
from github_network.base.models import Owner, Package, Repository


def _repo(full_name: str, language: str | None = "Java") -> Repository:
    owner, name = full_name.split("/")
    return Repository(full_name=full_name, owner=owner, name=name, html_url=f"https://github.com/{full_name}", language=language)


def test_package_equality_uses_id_and_name():
    assert Package("a=", "x") == Package("a=", "x")
    assert Package("a=", "x") != Package("b=", "x")
    assert len({Package("a=", "x"), Package("a=", "x"), Package("b=", "x")}) == 2


def test_package_sorts_by_name():
    packages = [Package("1", "zeta"), Package("2", "alpha"), Package("3", "mid")]
    assert [p.name for p in sorted(packages)] == ["alpha", "mid", "zeta"]


def test_repository_identity_is_case_insensitive_full_name():
    a = _repo("Alice/Tool", language="Java")
    b = _repo("alice/tool", language="Kotlin")
    assert a == b
    assert len({a, b}) == 1
    assert a != _repo("alice/other")


def test_repository_sorting():
    repos = [_repo("b/x"), _repo("A/y"), _repo("a/x")]
    assert [r.full_name for r in sorted(repos)] == ["a/x", "A/y", "b/x"]


def test_unbound_owner_cannot_fetch_repositories():
    with pytest.raises(RuntimeError):
        Owner(login="nobody").get_repository("x")


def test_owner_delegates_to_client():
    calls = []

    class _Client:
        def get_repository(self, owner, name):
            calls.append((owner, name))
            return _repo(f"{owner}/{name}")

    owner = Owner(login="acme", kind="Organization", client=_Client())
    assert owner.is_organization
    assert owner.get_repository("pipeline").full_name == "acme/pipeline"
    assert calls == [("acme", "pipeline")]


def test_repository_dto_ignores_unknown_fields():
    dto = RepositoryDTO.model_validate(
        {
            "full_name": "acme/pipeline",
            "name": "pipeline",
            "owner": {"login": "acme", "type": "Organization"},
            "html_url": "https://github.com/acme/pipeline",
            "language": None,
            "topics": ["etl"],
        }
    )
    repo = dto.to_model()
    assert repo.owner == "acme"
    assert repo.language is None
    assert repo.stargazers_count == 0


def test_owner_dto_default_kind():
    owner = OwnerDTO.model_validate({"login": "acme"}).to_model(default_kind="Organization")
    assert owner.kind == "Organization"
