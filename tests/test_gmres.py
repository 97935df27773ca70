import unittest

from krylovkit.gmres import GMRES
from krylovkit.restartedsolver import RestartedSolver
from krylovkit.backend import norm
from krylovkit.errors import ConfigurationError
from utils import backends, rand_data, tridiagonal, convection_diffusion

class TestGMRES(unittest.TestCase):

    def setUp(self):
        self.backends = backends

    def assert_solution(self, mat, rhs, res, tol):
        self.assertLess(norm(rhs - mat @ res.array) / norm(rhs), tol)

    def test_identity(self) -> None:
        for xp in self.backends:
            mat = xp.eye(3)
            rhs = xp.asarray([2.0, 3.0, 4.0])
            res = GMRES()(mat, rhs)

            self.assertTrue(res.converged)
            self.assertEqual(res.cycles, 1)
            self.assertEqual(res.residuals[0], 1.0)
            self.assertAlmostEqual(res.residuals[1], 0.0)
            self.assertEqual(res.subspaces, [3])
            self.assertLess(float(xp.max(xp.abs(res.array - rhs))), 1e-12)

    def test_tridiagonal(self) -> None:
        mat = tridiagonal(100, -1.0, 4.0, -2.0)
        for xp in self.backends:
            rhs = xp.ones(100)
            res = GMRES(subspace=20, nsteps=100, eps=1e-10)(mat, rhs)

            self.assertTrue(res.converged)
            self.assertEqual(len(res.residuals), res.cycles + 1)
            self.assertTrue(all(m == 20 for m in res.subspaces))
            self.assert_solution(mat, rhs, res, 1e-8)
            for prev, cur in zip(res.residuals[:-1], res.residuals[1:]):
                self.assertLessEqual(cur, prev * (1.0 + 1e-10) + 1e-13)

    def test_guess(self) -> None:
        for xp in self.backends:
            mat = 2.0 * xp.eye(60)
            rhs = rand_data(xp, 60, seed=3)
            res = GMRES(subspace=10)(mat, rhs, rhs / 2.0)

            self.assertTrue(res.converged)
            self.assertEqual(res.cycles, 1)
            self.assertEqual(res.residuals, [1.0, 0.0])
            self.assertTrue(xp.all(xp.equal(res.array, rhs / 2.0)))

    def test_zero_residual(self) -> None:
        for xp in self.backends:
            mat = xp.eye(5)
            rhs = xp.zeros(5)
            res = GMRES()(mat, rhs)

            self.assertTrue(res.converged)
            self.assertEqual(res.cycles, 1)
            self.assertEqual(res.residuals, [1.0, 0.0])
            self.assertTrue(xp.all(xp.equal(res.array, rhs)))

    def test_max_cycles(self) -> None:
        mat = convection_diffusion(200, 0.5)
        for xp in self.backends:
            rhs = xp.ones(200)
            res = GMRES(subspace=2, nsteps=3, eps=1e-14)(mat, rhs)

            self.assertFalse(res.converged)
            self.assertEqual(res.cycles, 3)
            self.assertEqual(len(res.residuals), 4)
            self.assertLess(res.residuals[-1], 1.0)

    def test_operator(self) -> None:
        for xp in self.backends:
            rhs = rand_data(xp, 12, seed=4)
            res = GMRES(subspace=4)(lambda x: 2.0 * x, rhs)

            self.assertTrue(res.converged)
            self.assertLess(float(xp.max(xp.abs(2.0 * res.array - rhs))), 1e-10)

    def test_integer_rhs(self) -> None:
        for xp in self.backends:
            rhs = xp.asarray([1, 2, 3])
            res = GMRES()(xp.eye(3), rhs)

            self.assertTrue(xp.isdtype(res.array.dtype, "real floating"))
            self.assertTrue(res.converged)

    def test_tolerance_clamp(self) -> None:
        for xp in self.backends:
            mat = xp.eye(4)
            rhs = xp.ones(4)
            with self.assertLogs("krylovkit.restartedsolver", level="WARNING"):
                res = GMRES(eps=2.0)(mat, rhs)
            self.assertTrue(res.converged)
            with self.assertLogs("krylovkit.restartedsolver", level="WARNING"):
                res = GMRES(eps=0.0)(mat, rhs)
            self.assertTrue(res.converged)

    def test_config(self) -> None:
        for xp in self.backends:
            with self.assertRaises(ConfigurationError):
                GMRES()(xp.ones((3, 4)), xp.ones(3))
            with self.assertRaises(ConfigurationError):
                GMRES()(xp.eye(3), xp.ones(4))
            with self.assertRaises(ConfigurationError):
                GMRES()(xp.eye(3), xp.ones(3), xp.ones(2))
            with self.assertRaises(ConfigurationError):
                GMRES()(xp.eye(3), xp.ones((3, 1)))
            with self.assertRaises(ConfigurationError):
                GMRES()(xp.eye(3), xp.ones(0))
            with self.assertRaises(ConfigurationError):
                GMRES()(xp.eye(3), xp.asarray([1.0 + 1.0j, 2.0, 3.0]))
            with self.assertRaises(ConfigurationError):
                GMRES()(xp.eye(3), xp.ones(3), xp.asarray([1.0j, 0.0, 0.0]))
        with self.assertRaises(TypeError):
            RestartedSolver()
        with self.assertRaises(ConfigurationError):
            GMRES(subspace=0)
        with self.assertRaises(ConfigurationError):
            GMRES(nsteps=0)
        with self.assertRaises(ConfigurationError):
            GMRES(eps=-1.0)

if __name__ == "__main__":
    unittest.main()
