"""Unit tests for ai_handler.services.tasks.prompts."""

from ai_handler.core.config import HandlerSettings
from ai_handler.models.api_models import TaskPayload
from ai_handler.services.tasks.prompts import (
    DEFAULT_GENERIC_PROMPT,
    build_affiliate_instruction,
    build_prompts,
)


class TestAffiliateInstruction:

    def test_absent_without_ids(self):
        assert build_affiliate_instruction(HandlerSettings()) == ""

    def test_single_id_renders_others_empty(self):
        settings = HandlerSettings(lazada_affiliate_id="LZ-42")
        block = build_affiliate_instruction(settings)

        assert "CRITICAL MONETIZATION" in block
        assert "• Lazada: &sub_id1=LZ-42\n" in block
        assert "• Shopee: &aff_sub1=\n" in block
        assert "• TikTok Shop: &aff_sub_id1=\n" in block
        assert "None" not in block
        assert "undefined" not in block
        assert block.endswith("Do not say you use affiliate links.")

    def test_involve_asia_alone_enables_block(self):
        block = build_affiliate_instruction(HandlerSettings(involve_asia_id="IA-1"))
        assert "https://app.involve.asia/publisher/programs" in block

    def test_all_ids(self):
        settings = HandlerSettings(
            shopee_affiliate_id="SP",
            lazada_affiliate_id="LZ",
            tiktok_affiliate_id="TT",
            involve_asia_id="IA",
        )
        block = build_affiliate_instruction(settings)
        assert "&aff_sub1=SP" in block
        assert "&sub_id1=LZ" in block
        assert "&aff_sub_id1=TT" in block


class TestBuildPrompts:

    def test_template_keys(self):
        prompts = build_prompts(HandlerSettings(), TaskPayload())
        assert set(prompts) == {"deal-assassin", "getFutureIntel", "generic"}

    def test_deal_assassin_without_affiliates(self):
        prompts = build_prompts(HandlerSettings(), TaskPayload())
        assert "Deal Assassin" in prompts["deal-assassin"]
        assert "MONETIZATION" not in prompts["deal-assassin"]
        assert "affiliate" not in prompts["deal-assassin"].lower()

    def test_deal_assassin_with_affiliate(self):
        prompts = build_prompts(HandlerSettings(shopee_affiliate_id="SP-9"), TaskPayload())
        assert prompts["deal-assassin"].startswith("You are the 'Deal Assassin' for Malaysia.")
        assert "&aff_sub1=SP-9" in prompts["deal-assassin"]

    def test_future_intel_demands_json(self):
        prompt = build_prompts(HandlerSettings(), TaskPayload())["getFutureIntel"]
        assert "Output ONLY valid JSON" in prompt
        assert '"why_it_matters"' in prompt
        assert "low|med|high" in prompt
        assert "No markdown, no backticks." in prompt

    def test_generic_uses_payload_system_prompt(self):
        payload = TaskPayload(systemPrompt="You are a pirate.")
        assert build_prompts(HandlerSettings(), payload)["generic"] == "You are a pirate."

    def test_generic_empty_system_prompt_falls_back(self):
        payload = TaskPayload(systemPrompt="")
        assert build_prompts(HandlerSettings(), payload)["generic"] == DEFAULT_GENERIC_PROMPT

    def test_pure_for_same_inputs(self):
        settings = HandlerSettings(tiktok_affiliate_id="TT")
        payload = TaskPayload(systemPrompt="x")
        assert build_prompts(settings, payload) == build_prompts(settings, payload)
