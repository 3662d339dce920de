"""Integration tests for contract registry construction."""

from pathlib import Path

import pytest
from web3 import Web3

from dapp_console.exceptions import ArtifactDirectoryError
from dapp_console.registry import build_registry, build_registry_from_listing, load_contract
from dapp_console.transport import Transport

ADDRESS_A = "0xaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaa"
ADDRESS_B = "0xbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbb"
ADDRESS_C = "0xcccccccccccccccccccccccccccccccccccccccc"


class TestBuildRegistry:
    """Test build_registry on the sample contracts directory."""

    def test_ballot_bound_to_most_recent_deployment(self, contracts_dir: Path, transport: Transport):
        """Test Ballot.deployed {"3": [A, B]} on network "3" binds Ballot to B."""
        registry = build_registry(contracts_dir, transport)

        assert registry.addresses["Ballot"] == ADDRESS_B
        assert registry.contracts["Ballot"].address == Web3.to_checksum_address(ADDRESS_B)
        assert registry.is_bound("Ballot")

    def test_contract_without_deployment_is_unbound(self, contracts_dir: Path, transport: Transport):
        registry = build_registry(contracts_dir, transport)

        assert "Token" in registry.contracts
        assert "Token" not in registry.addresses
        assert registry.contracts["Token"].address is None
        assert not registry.is_bound("Token")

    def test_abis_are_kept(self, contracts_dir: Path, transport: Transport, ballot_abi, token_abi):
        registry = build_registry(contracts_dir, transport)

        assert registry.abis["Ballot"] == ballot_abi
        assert registry.abis["Token"] == token_abi

    def test_network_id_from_transport(self, contracts_dir: Path, web3_client):
        registry = build_registry(contracts_dir, Transport(web3_client, "1"))

        assert registry.network_id == "1"
        assert registry.addresses["Ballot"] == "0x1111111111111111111111111111111111111111"

    def test_network_without_deployments_leaves_proxy_unbound(
        self, contracts_dir: Path, web3_client
    ):
        registry = build_registry(contracts_dir, Transport(web3_client, "42"))

        assert "Ballot" in registry.contracts
        assert registry.addresses == {}
        assert registry.skipped == ()

    def test_proxies_expose_descriptor_functions(self, contracts_dir: Path, transport: Transport):
        registry = build_registry(contracts_dir, transport)

        ballot = registry.contracts["Ballot"]
        for name in ("chairperson", "delegate", "giveRightToVote", "vote", "winnerName"):
            assert hasattr(ballot.functions, name)

    def test_registry_is_read_only(self, contracts_dir: Path, transport: Transport):
        registry = build_registry(contracts_dir, transport)

        with pytest.raises(TypeError):
            registry.contracts["Other"] = None
        with pytest.raises(TypeError):
            registry.addresses["Token"] = ADDRESS_A

    def test_missing_directory_raises(self, tmp_path: Path, transport: Transport):
        with pytest.raises(ArtifactDirectoryError):
            build_registry(tmp_path / "missing", transport)

    def test_empty_directory(self, tmp_path: Path, transport: Transport):
        registry = build_registry(tmp_path, transport)

        assert registry.names() == []
        assert registry.skipped == ()


class TestMalformedArtifacts:
    """Test that malformed artifacts are skipped and reported."""

    def test_malformed_descriptor_is_skipped(
        self, tmp_path: Path, transport: Transport, write_artifact, ballot_abi
    ):
        write_artifact(tmp_path, "Good.abi", ballot_abi)
        write_artifact(tmp_path, "Bad.abi", "[ not json")

        registry = build_registry(tmp_path, transport)

        assert registry.names() == ["Good"]
        assert "Bad" not in registry.abis
        assert [s.kind for s in registry.skipped] == ["abi"]
        assert registry.skipped[0].path.endswith("Bad.abi")

    def test_empty_descriptor_is_skipped(self, tmp_path: Path, transport: Transport, write_artifact):
        write_artifact(tmp_path, "Empty.abi", [])

        registry = build_registry(tmp_path, transport)

        assert "Empty" not in registry.contracts
        assert len(registry.skipped) == 1

    def test_skipped_descriptor_ignores_its_deployment(
        self, tmp_path: Path, transport: Transport, write_artifact
    ):
        write_artifact(tmp_path, "Bad.abi", "null")
        write_artifact(tmp_path, "Bad.deployed", {"3": [ADDRESS_A]})

        registry = build_registry(tmp_path, transport)

        assert "Bad" not in registry.contracts
        assert "Bad" not in registry.addresses

    def test_malformed_deployment_leaves_proxy_unbound(
        self, tmp_path: Path, transport: Transport, write_artifact, ballot_abi
    ):
        write_artifact(tmp_path, "Ballot.abi", ballot_abi)
        write_artifact(tmp_path, "Ballot.deployed", "{ broken")

        registry = build_registry(tmp_path, transport)

        assert "Ballot" in registry.contracts
        assert registry.contracts["Ballot"].address is None
        assert "Ballot" not in registry.addresses
        assert [s.kind for s in registry.skipped] == ["deployed"]

    def test_unchecked_address_is_recorded_but_proxy_unbound(
        self, tmp_path: Path, transport: Transport, write_artifact, ballot_abi
    ):
        """Test {"3": ["0xAAA", "0xBBB"]} on network "3" resolves Ballot to "0xBBB"."""
        write_artifact(tmp_path, "Ballot.abi", ballot_abi)
        write_artifact(tmp_path, "Ballot.deployed", {"3": ["0xAAA", "0xBBB"]})

        registry = build_registry(tmp_path, transport)

        assert registry.addresses["Ballot"] == "0xBBB"
        assert registry.contracts["Ballot"].address is None
        assert not registry.is_bound("Ballot")
        assert [s.kind for s in registry.skipped] == ["deployed"]
        assert "0xBBB" in registry.skipped[0].reason

    def test_descriptor_rejected_by_web3_is_skipped(
        self, tmp_path: Path, transport: Transport, write_artifact, ballot_abi
    ):
        """Test a function entry without a name does not abort the build."""
        write_artifact(tmp_path, "Ballot.abi", ballot_abi)
        write_artifact(tmp_path, "Odd.abi", [{"type": "function", "inputs": []}])
        write_artifact(tmp_path, "Odd.deployed", {"3": [ADDRESS_A]})

        registry = build_registry(tmp_path, transport)

        assert registry.names() == ["Ballot"]
        assert "Odd" not in registry.addresses
        assert [s.kind for s in registry.skipped] == ["abi"]
        assert registry.skipped[0].path.endswith("Odd.abi")

    def test_skips_are_logged(
        self, tmp_path: Path, transport: Transport, write_artifact, caplog
    ):
        write_artifact(tmp_path, "Bad.abi", "{")

        with caplog.at_level("WARNING", logger="dapp_console.registry"):
            build_registry(tmp_path, transport)

        assert "Bad.abi" in caplog.text

    def test_orphan_deployment_is_ignored(self, tmp_path: Path, transport: Transport, write_artifact):
        """Test that a .deployed file without a .abi file creates nothing."""
        write_artifact(tmp_path, "Orphan.deployed", {"3": [ADDRESS_A]})

        registry = build_registry(tmp_path, transport)

        assert registry.names() == []
        assert registry.skipped == ()


class TestResolutionProperties:
    """Test address resolution across history lengths."""

    @pytest.mark.parametrize("length", [1, 2, 5])
    def test_last_address_wins(
        self, tmp_path: Path, transport: Transport, write_artifact, ballot_abi, length: int
    ):
        history = [f"0x{i + 1:040x}" for i in range(length)]
        write_artifact(tmp_path, "Ballot.abi", ballot_abi)
        write_artifact(tmp_path, "Ballot.deployed", {"3": history})

        registry = build_registry(tmp_path, transport)

        assert registry.addresses["Ballot"] == history[-1]

    def test_only_deployed_contracts_bound(
        self, tmp_path: Path, transport: Transport, write_artifact, ballot_abi, token_abi
    ):
        """Test descriptors {A, B} with a deployment only for A."""
        write_artifact(tmp_path, "A.abi", ballot_abi)
        write_artifact(tmp_path, "B.abi", token_abi)
        write_artifact(tmp_path, "A.deployed", {"3": [ADDRESS_C]})

        registry = build_registry(tmp_path, transport)

        assert set(registry.contracts) == {"A", "B"}
        assert registry.contracts["A"].address == Web3.to_checksum_address(ADDRESS_C)
        assert registry.contracts["B"].address is None


class TestBuildRegistryFromListing:
    """Test build_registry_from_listing and load_contract."""

    def test_follows_listing_order(self, contracts_dir: Path, transport: Transport):
        registry = build_registry_from_listing(
            contracts_dir, ["Token.abi", "Ballot.abi"], ["Ballot.deployed"], transport
        )

        assert registry.names() == ["Token", "Ballot"]

    def test_deployment_not_in_listing_is_not_read(self, contracts_dir: Path, transport: Transport):
        """Test that only listed .deployed files are considered."""
        registry = build_registry_from_listing(contracts_dir, ["Ballot.abi"], [], transport)

        assert "Ballot" not in registry.addresses

    def test_load_contract_returns_entry(self, contracts_dir: Path, transport: Transport):
        entry, skipped = load_contract(
            contracts_dir, "Ballot.abi", ["Ballot.deployed"], transport
        )

        assert entry.name == "Ballot"
        assert entry.address == ADDRESS_B
        assert skipped == []

    def test_load_contract_skips_missing_descriptor(self, tmp_path: Path, transport: Transport):
        entry, skipped = load_contract(tmp_path, "Gone.abi", [], transport)

        assert entry is None
        assert skipped[0].kind == "abi"
