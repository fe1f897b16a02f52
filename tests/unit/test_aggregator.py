"""Tests for MultiTargetAggregator."""

from workload_resolver.resolution.aggregator import ResolutionResult
from workload_resolver.resolution.diagnostics import (
    MISSING_WORKLOAD_CODE,
    UNKNOWN_PLATFORM_CODE,
    MissingWorkloadDiagnostic,
    SuggestedWorkload,
    UnknownPlatformDiagnostic,
)
from workload_resolver.resolution.platform import PlatformToken, parse_target_framework
from workload_resolver.resolution.resolver import OutcomeStatus


class TestResolveAll:
    """Tests for resolve_all."""

    def test_all_satisfied(self, aggregator):
        result = aggregator.resolve_all(
            ["android", "ios"], {"microsoft-android-sdk-full", "microsoft-ios-sdk-full"}
        )
        assert result.all_satisfied
        assert result.diagnostics == ()
        assert result.errors == []
        assert result.suggested_workloads == ()
        assert result.satisfied_tokens == ["android", "ios"]

    def test_no_tokens(self, aggregator):
        result = aggregator.resolve_all([], set())
        assert result.all_satisfied
        assert result.outcomes == ()

    def test_multitargeted_missing_workloads_single_error(self, aggregator):
        result = aggregator.resolve_all(["android", "ios"], set())

        assert not result.all_satisfied
        assert len(result.diagnostics) == 2
        errors = result.errors
        assert len(errors) == 1
        assert errors[0].code == MISSING_WORKLOAD_CODE
        assert "android" in errors[0].message
        assert "ios" in errors[0].message

    def test_multitargeted_unknown_platforms_single_error(self, aggregator):
        result = aggregator.resolve_all(["foo", "bar"], set())

        assert not result.all_satisfied
        assert [d.token for d in result.diagnostics] == ["foo", "bar"]
        errors = result.errors
        assert len(errors) == 1
        assert errors[0].code == UNKNOWN_PLATFORM_CODE
        assert result.suggested_workloads == ()

    def test_reports_every_failure_in_declaration_order(self, aggregator):
        result = aggregator.resolve_all(["ios", "foo", "android", "workloadtestplatform"], set())
        assert result.diagnostics == (
            MissingWorkloadDiagnostic(token="ios", candidate_workload_ids=("microsoft-ios-sdk-full",)),
            UnknownPlatformDiagnostic(token="foo"),
            MissingWorkloadDiagnostic(
                token="android", candidate_workload_ids=("microsoft-android-sdk-full",)
            ),
            MissingWorkloadDiagnostic(
                token="workloadtestplatform",
                candidate_workload_ids=("microsoft-net-sdk-testworkload",),
            ),
        )
        assert [e.code for e in result.errors] == [UNKNOWN_PLATFORM_CODE, MISSING_WORKLOAD_CODE]

    def test_partial_installation(self, aggregator):
        result = aggregator.resolve_all(["android", "ios"], {"microsoft-android-sdk-full"})
        assert [o.status for o in result.outcomes] == [
            OutcomeStatus.SATISFIED,
            OutcomeStatus.MISSING_WORKLOAD,
        ]
        assert [d.token for d in result.diagnostics] == ["ios"]
        assert result.satisfied_tokens == ["android"]

    def test_duplicate_tokens_resolved_once(self, aggregator):
        tokens = [
            PlatformToken(name="android", version="30.0"),
            PlatformToken(name="android", version="31.0"),
            "Android",
        ]
        result = aggregator.resolve_all(tokens, set())
        assert len(result.outcomes) == 1
        assert len(result.diagnostics) == 1
        assert len(result.suggested_workloads) == 1

    def test_string_form_of_parsed_token(self, aggregator):
        token = parse_target_framework("net5.0-android30.0")
        result = aggregator.resolve_all([str(token)], {"microsoft-android-sdk-full"})
        assert result.all_satisfied
        assert [(o.token, o.status) for o in result.outcomes] == [
            ("android", OutcomeStatus.SATISFIED)
        ]

    def test_versioned_strings_resolved_once(self, aggregator):
        result = aggregator.resolve_all(["android30.0", "android31.0"], set())
        assert [d.token for d in result.diagnostics] == ["android"]

    def test_idempotent(self, aggregator):
        first = aggregator.resolve_all(["android", "foo", "ios"], {"microsoft-ios-sdk-full"})
        second = aggregator.resolve_all(["android", "foo", "ios"], {"microsoft-ios-sdk-full"})
        assert first == second
        assert first.model_dump_json() == second.model_dump_json()

    def test_resolver_disabled(self, aggregator):
        result = aggregator.resolve_all(
            ["workloadtestplatform"], {"microsoft-net-sdk-testworkload"}, resolver_enabled=False
        )
        assert not result.all_satisfied
        assert result.errors[0].code == UNKNOWN_PLATFORM_CODE
        assert "workloadtestplatform" in result.errors[0].message


class TestSuggestedWorkloads:
    """Tests for suggested workload output."""

    def test_suggestion_per_missing_workload(self, aggregator):
        result = aggregator.resolve_all(["android", "ios"], set())
        assert result.suggested_workloads == (
            SuggestedWorkload(
                workload_id="microsoft-android-sdk-full",
                component_id="microsoft.net.component.android",
            ),
            SuggestedWorkload(
                workload_id="microsoft-ios-sdk-full", component_id="microsoft.net.component.ios"
            ),
        )

    def test_no_suggestion_for_unknown_platforms(self, aggregator):
        assert aggregator.suggest_workloads(["foo"], set()) == []

    def test_suggest_workloads_does_not_fail(self, aggregator):
        suggestions = aggregator.suggest_workloads(["ios", "foo"], set())
        assert [s.workload_id for s in suggestions] == ["microsoft-ios-sdk-full"]


class TestResolveTargetFrameworks:
    """End-to-end scenarios starting from target-framework monikers."""

    def test_builds_with_installed_workload(self, aggregator):
        result = aggregator.resolve_target_frameworks(
            "net5.0-workloadtestplatform", {"microsoft-net-sdk-testworkload"}
        )
        assert result.all_satisfied

    def test_fails_without_workload(self, aggregator):
        result = aggregator.resolve_target_frameworks(
            "net5.0-missingworkloadtestplatform", {"microsoft-net-sdk-testworkload"}
        )
        assert not result.all_satisfied
        assert [e.code for e in result.errors] == ["NETSDK1147"]

    def test_creates_suggested_workload_items(self, aggregator):
        result = aggregator.resolve_target_frameworks(
            "net5.0-missingworkloadtestplatform", {"microsoft-net-sdk-testworkload"}
        )
        assert [(s.workload_id, s.component_id) for s in result.suggested_workloads] == [
            ("microsoft-net-sdk-missingtestworkload", "microsoft.net.sdk.missingtestworkload")
        ]

    def test_fails_with_resolver_disabled(self, aggregator):
        result = aggregator.resolve_target_frameworks(
            "net5.0-workloadtestplatform",
            {"microsoft-net-sdk-testworkload"},
            resolver_enabled=False,
        )
        assert [e.code for e in result.errors] == ["NETSDK1139"]

    def test_multitargeted_without_workloads(self, aggregator):
        result = aggregator.resolve_target_frameworks("net5.0-android;net5.0-ios", set())
        assert len(result.errors) == 1
        rendered = str(result.errors[0])
        assert "NETSDK1147" in rendered
        assert "android" in rendered
        assert "ios" in rendered

    def test_neutral_framework_needs_nothing(self, aggregator):
        result = aggregator.resolve_target_frameworks("net5.0", set())
        assert result.all_satisfied
        assert result.outcomes == ()


class TestResolutionResult:
    """Tests for the ResolutionResult model."""

    def test_json_round_trip_keeps_diagnostic_types(self, aggregator):
        result = aggregator.resolve_all(["foo", "ios"], set())
        restored = ResolutionResult.model_validate_json(result.model_dump_json())
        assert isinstance(restored.diagnostics[0], UnknownPlatformDiagnostic)
        assert isinstance(restored.diagnostics[1], MissingWorkloadDiagnostic)
        assert restored == result
