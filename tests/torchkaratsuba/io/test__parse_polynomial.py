import pytest
import torch

from torchkaratsuba.io import (
    PolynomialParseError,
    parse_polynomial,
    prompt_polynomial,
    read_polynomial,
)
from torchkaratsuba.polynomial import PolynomialError


class TestParsePolynomial:
    def test_two_lines(self):
        p = parse_polynomial("2\n2 0 3\n")
        assert p.degree() == 2
        torch.testing.assert_close(
            p.coeffs, torch.tensor([2.0, 0.0, 3.0], dtype=torch.float64)
        )

    def test_single_line(self):
        """Any whitespace separates tokens."""
        p = parse_polynomial("1 1 1")
        torch.testing.assert_close(
            p.coeffs, torch.tensor([1.0, 1.0], dtype=torch.float64)
        )

    def test_real_coefficients(self):
        p = parse_polynomial("1\n-0.5 2.25")
        torch.testing.assert_close(
            p.coeffs, torch.tensor([-0.5, 2.25], dtype=torch.float64)
        )

    def test_degree_zero(self):
        p = parse_polynomial("0\n0")
        assert p.degree() == 0

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "   \n ",
            "x\n1 2",
            "-1\n1",
            "1.5\n1 2",
            "1\n1",
            "1\n1 2 3",
            "1\n1 two",
            "1\n1 nan",
            "1\n1 inf",
        ],
    )
    def test_malformed_raises(self, text):
        with pytest.raises(PolynomialParseError):
            parse_polynomial(text)

    def test_parse_error_hierarchy(self):
        with pytest.raises(PolynomialError):
            parse_polynomial("abc")
        with pytest.raises(ValueError):
            parse_polynomial("abc")


class TestReadPolynomial:
    def test_read_file(self, tmp_path):
        path = tmp_path / "first.txt"
        path.write_text("2\n1 2 1\n")
        p = read_polynomial(path)
        torch.testing.assert_close(
            p.coeffs, torch.tensor([1.0, 2.0, 1.0], dtype=torch.float64)
        )

    def test_read_malformed_file(self, tmp_path):
        path = tmp_path / "bad.txt"
        path.write_text("2\n1 2\n")
        with pytest.raises(PolynomialParseError):
            read_polynomial(str(path))


class TestPromptPolynomial:
    def test_prompts_in_order(self):
        prompts = []
        answers = iter(["1", "1 1"])

        def input_fn(prompt):
            prompts.append(prompt)
            return next(answers)

        p = prompt_polynomial(input_fn)
        assert prompts == [
            "Degree of polynomial: ",
            "Ascending polynomial's constants: ",
        ]
        torch.testing.assert_close(
            p.coeffs, torch.tensor([1.0, 1.0], dtype=torch.float64)
        )

    def test_end_of_input(self):
        def input_fn(prompt):
            raise EOFError

        with pytest.raises(PolynomialParseError):
            prompt_polynomial(input_fn)

    def test_extra_tokens_on_degree_line(self):
        answers = iter(["1 1", "1"])
        with pytest.raises(PolynomialParseError):
            prompt_polynomial(lambda prompt: next(answers))
