# tests/core_test/test_policy.py
import pytest

from objviz.config import DEFAULT_BLACKLIST, VisualizerConfig
from objviz.services.policy import Decision, VisitPolicy
from objviz.types import MemberKind


@pytest.fixture
def policy():
    return VisitPolicy(
        whitelist={"data", "secret_value"},
        blacklist=list(DEFAULT_BLACKLIST) + ["secret", "random"],
    )


class TestDefaults:

    @pytest.mark.parametrize("kind,expected", [
        (MemberKind.SCALAR, Decision.NAME_ONLY),
        (MemberKind.NULL, Decision.NAME_ONLY),
        (MemberKind.COMPOSITE, Decision.TRAVERSE),
        (MemberKind.CONTAINER, Decision.TRAVERSE),
    ])
    def test_unlisted_member(self, policy, kind, expected):
        assert policy.classify("left", kind) is expected

    def test_collapse_containers_summarizes(self):
        policy = VisitPolicy(collapse_containers=True)
        assert policy.classify("items", MemberKind.CONTAINER) is Decision.SUMMARIZE
        assert policy.classify("child", MemberKind.COMPOSITE) is Decision.TRAVERSE


class TestWhitelist:

    @pytest.mark.parametrize("kind,expected", [
        (MemberKind.SCALAR, Decision.NAME_AND_VALUE),
        (MemberKind.NULL, Decision.NAME_ONLY),
        (MemberKind.COMPOSITE, Decision.TRAVERSE),
        (MemberKind.CONTAINER, Decision.TRAVERSE),
    ])
    def test_whitelisted_member(self, policy, kind, expected):
        assert policy.classify("data", kind) is expected

    def test_exact_match_only(self, policy):
        assert policy.is_whitelisted("data")
        assert not policy.is_whitelisted("data2")
        assert not policy.is_whitelisted("_data")

    def test_whitelist_beats_blacklist(self, policy):
        # "secret_value" contains the blacklisted "secret"
        assert policy.is_blacklisted("secret_value")
        assert policy.classify("secret_value", MemberKind.SCALAR) is Decision.NAME_AND_VALUE

    def test_pinned_acts_as_whitelisted(self, policy):
        assert policy.classify("secret_key", MemberKind.SCALAR, pinned=True) is Decision.NAME_AND_VALUE
        assert policy.classify("x", MemberKind.SCALAR, pinned=True) is Decision.NAME_AND_VALUE

    def test_whitelisted_container_is_never_summarized(self):
        policy = VisitPolicy(whitelist={"items"}, collapse_containers=True)
        assert policy.classify("items", MemberKind.CONTAINER) is Decision.TRAVERSE


class TestBlacklist:

    @pytest.mark.parametrize("name", ["secret_key", "my_secret", "random", "_Vault__code", "__dict__", "_abc_impl"])
    def test_substring_match_skips(self, policy, name):
        assert policy.classify(name, MemberKind.SCALAR) is Decision.SKIP
        assert policy.classify(name, MemberKind.COMPOSITE) is Decision.SKIP

    def test_empty_entries_are_ignored(self):
        policy = VisitPolicy(blacklist=["", "x"])
        assert policy.blacklist == ["x"]
        assert not policy.is_blacklisted("name")

    def test_skip_does_not_show_field(self):
        assert not Decision.SKIP.shows_field
        assert Decision.NAME_ONLY.shows_field


class TestConfigLists:

    def test_effective_blacklist_merges_defaults(self):
        config = VisualizerConfig(blacklist=["random", "__"])
        assert config.effective_blacklist() == ["__", "_abc_", "random"]

    def test_default_blacklist_can_be_disabled(self):
        config = VisualizerConfig(blacklist=["random"], use_default_blacklist=False)
        assert config.effective_blacklist() == ["random"]

    def test_with_lists_returns_extended_copy(self):
        base = VisualizerConfig(whitelist={"a"}, blacklist=["x"])
        extended = base.with_lists(["b"], ["x", "y"])
        assert extended.whitelist == {"a", "b"}
        assert extended.blacklist == ["x", "y"]
        assert base.whitelist == {"a"}
        assert base.blacklist == ["x"]

    def test_bare_string_is_one_name(self):
        extended = VisualizerConfig(blacklist="x").with_lists("data", "random")
        assert extended.whitelist == {"data"}
        assert extended.blacklist == ["x", "random"]
        assert VisualizerConfig(blacklist="random").effective_blacklist() == ["__", "_abc_", "random"]

    def test_policy_accepts_bare_strings(self):
        policy = VisitPolicy(whitelist="data", blacklist="random")
        assert policy.whitelist == {"data"}
        assert not policy.is_blacklisted("r")
        assert policy.is_blacklisted("random_seed")
