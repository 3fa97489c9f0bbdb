import json
from pathlib import Path

import pytest

from fruko_bindgen.pipeline import GeneratorConfig, PipelineGenerator

REFERENCE_TARGETS = {
    "reference.hpp": "cpp",
    "reference.ts": "ts-mobx",
}


def discover_test_cases():
    """Automatically discover all test cases from test_cases directory"""
    test_cases_dir = Path(__file__).parent / "test_data" / "test_cases"
    test_cases = []

    for test_dir in sorted(test_cases_dir.iterdir()):
        if not test_dir.is_dir() or test_dir.name.startswith("."):
            continue

        definition_file = test_dir / "definition.fdd"
        if not definition_file.exists():
            continue

        for reference_name, target in REFERENCE_TARGETS.items():
            reference_file = test_dir / reference_name
            if reference_file.exists():
                test_cases.append(
                    {
                        "test_name": f"{test_dir.name}_{target}",
                        "definition_file": definition_file,
                        "config_file": test_dir / "config.json",
                        "target": target,
                        "reference_file": reference_file,
                    }
                )

    return test_cases


@pytest.mark.parametrize("test_case", discover_test_cases(), ids=lambda tc: tc["test_name"])
def test_reference_file_generation(test_case):
    """Test code generation against reference files"""
    source = test_case["definition_file"].read_text(encoding="utf-8")

    if test_case["config_file"].exists():
        with open(test_case["config_file"]) as f:
            config = GeneratorConfig.from_dict(json.load(f))
    else:
        config = GeneratorConfig()

    codegen = PipelineGenerator(test_case["definition_file"].name, source, config)
    generated_code = codegen.generate(test_case["target"])

    reference_code = test_case["reference_file"].read_text(encoding="utf-8")

    # Normalize line endings for cross-platform compatibility
    generated_normalized = generated_code.replace("\r\n", "\n")
    reference_normalized = reference_code.replace("\r\n", "\n")

    if generated_normalized != reference_normalized:
        import difflib

        diff = difflib.unified_diff(
            reference_normalized.splitlines(keepends=True),
            generated_normalized.splitlines(keepends=True),
            fromfile="reference",
            tofile="generated",
            lineterm="",
        )
        diff_text = "".join(diff)

        pytest.fail(f"Generated code does not match reference for {test_case['test_name']}\n\nDiff:\n{diff_text}")


def test_reference_cases_discovered():
    """Both targets have at least one reference case"""
    targets = {tc["target"] for tc in discover_test_cases()}
    assert targets == {"cpp", "ts-mobx"}


@pytest.mark.parametrize("test_case", discover_test_cases(), ids=lambda tc: tc["test_name"])
def test_reference_files_have_no_surrounding_whitespace(test_case):
    """References are compared exactly, so they must not carry editor added newlines"""
    reference_code = test_case["reference_file"].read_text(encoding="utf-8")
    assert reference_code == reference_code.strip()


if __name__ == "__main__":
    test_cases = discover_test_cases()
    print(f"Discovered {len(test_cases)} test cases:")
    for tc in test_cases:
        print(f"  - {tc['test_name']}")
