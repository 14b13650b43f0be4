"""Tests for the keyword analysis engine."""

import asyncio

import pytest

from engine import AresEngine, ANALYSIS_STEPS, RAW_OUTPUT
from engine.prompts import ARES_SYSTEM_PROMPT, build_remediation_prompt
from engine.signatures import SIGNATURES


def analyze(text):
    return asyncio.run(AresEngine().analyze(text))


class TestSteps:
    def test_steps_are_fixed_script(self, benign_log):
        result = analyze(benign_log)
        assert result.steps == list(ANALYSIS_STEPS)
        assert len(result.steps) == 5
        assert result.steps[0] == "Identifying input signature..."
        assert result.steps[-1] == "Generating hardening strategies..."

    @pytest.mark.parametrize("text", ["x", "password", "privileged: true", "a" * 5000])
    def test_steps_constant_across_inputs(self, text, benign_log):
        assert analyze(text).steps == analyze(benign_log).steps

    def test_raw_output(self, benign_log):
        assert analyze(benign_log).raw_output == RAW_OUTPUT == "Analysis completed successfully."


class TestSecretSignature:
    def test_password_yields_single_critical_leak(self, leaked_password):
        findings = analyze(leaked_password).findings
        leaks = [f for f in findings if f.id == "sec-leak-1"]
        assert len(leaks) == 1
        assert leaks[0].severity == "Critical"
        assert leaks[0].title == "Potential Hardcoded Secret"
        assert "sed -i" in leaks[0].remediation_script

    def test_all_keywords_still_one_finding(self):
        findings = analyze("password secret key PASSWORD").findings
        assert [f.id for f in findings] == ["sec-leak-1"]

    @pytest.mark.parametrize("text", ["API_KEY=abc", "client_secret: x", "Password=hunter2"])
    def test_keywords_case_insensitive(self, text):
        ids = [f.id for f in analyze(text).findings]
        assert ids == ["sec-leak-1"]


class TestPrivilegedSignature:
    def test_privileged_pod(self):
        findings = analyze("privileged: true").findings
        assert [f.id for f in findings] == ["k8s-priv-1"]
        assert findings[0].severity == "High"
        assert findings[0].affected_component == "Deployment Spec"
        assert "allowPrivilegeEscalation: false" in findings[0].remediation_script

    def test_uppercase_flag_matches(self):
        assert analyze("PRIVILEGED: TRUE").findings[0].id == "k8s-priv-1"

    def test_security_context_alone_matches(self):
        assert [f.id for f in analyze("securityContext: {}").findings] == ["k8s-priv-1"]

    def test_order_privileged_before_secret(self, privileged_pod):
        text = privileged_pod + "\n  password: hunter2\n"
        assert [f.id for f in analyze(text).findings] == ["k8s-priv-1", "sec-leak-1"]


class TestFallback:
    def test_benign_input_yields_general_info(self, benign_log):
        findings = analyze(benign_log).findings
        assert len(findings) == 1
        assert findings[0].id == "gen-1"
        assert findings[0].severity == "Low"
        assert findings[0].remediation_script is None

    def test_no_fallback_when_something_matched(self, leaked_password):
        ids = [f.id for f in analyze(leaked_password).findings]
        assert "gen-1" not in ids


class TestEngineState:
    def test_findings_are_fresh_objects(self, leaked_password):
        first = analyze(leaked_password).findings[0]
        second = analyze(leaked_password).findings[0]
        assert first == second
        assert first is not second

    def test_history_seeded_with_system_prompt(self, benign_log):
        engine = AresEngine()
        assert engine.history == [ARES_SYSTEM_PROMPT]
        asyncio.run(engine.analyze(benign_log))
        assert len(engine.history) == 2
        assert engine.history[1].endswith(benign_log)

    def test_custom_signature_set(self, leaked_password):
        engine = AresEngine(signatures=SIGNATURES[:1])
        result = asyncio.run(engine.analyze(leaked_password))
        assert [f.id for f in result.findings] == ["gen-1"]


def test_remediation_prompt_template():
    prompt = build_remediation_prompt("k8s cluster", "Privileged container", language="Ansible")
    assert "Context: k8s cluster" in prompt
    assert "Finding: Privileged container" in prompt
    assert "Target Language: Ansible" in prompt
