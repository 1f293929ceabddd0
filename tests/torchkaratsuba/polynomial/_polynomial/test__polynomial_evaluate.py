import torch

from torchkaratsuba.polynomial import polynomial, polynomial_evaluate


class TestPolynomialEvaluate:
    def test_evaluate(self):
        """1 + 2x + 3x^2."""
        p = polynomial(torch.tensor([1.0, 2.0, 3.0]))
        x = torch.tensor([0.0, 1.0, -1.0, 2.0])
        torch.testing.assert_close(
            polynomial_evaluate(p, x), torch.tensor([1.0, 6.0, 2.0, 17.0])
        )

    def test_constant(self):
        p = polynomial(torch.tensor([4.0]))
        torch.testing.assert_close(
            polynomial_evaluate(p, torch.tensor([0.0, 3.0])),
            torch.tensor([4.0, 4.0]),
        )

    def test_batched(self):
        p = polynomial(torch.tensor([[1.0, 1.0], [0.0, 2.0]]))
        torch.testing.assert_close(
            polynomial_evaluate(p, torch.tensor(3.0)), torch.tensor([4.0, 6.0])
        )
