import unittest

from krylovkit import KrylovKit
from krylovkit.backend import norm
from krylovkit.numpy import krylovkit as np_krylovkit
from krylovkit.typing import GMRES, PDGMRES, LGMRES, ConfigurationError
from utils import backends, rand_data, convection_diffusion

class TestKrylovKit(unittest.TestCase):

    def setUp(self):
        self.krylovkit = [KrylovKit(backend) for backend in backends]

    def test_factories(self) -> None:
        for kk in self.krylovkit:
            self.assertIsInstance(kk.gmres(), GMRES)
            self.assertIsInstance(kk.lgmres(), LGMRES)
            solver = kk.pd_gmres(subspace=10, m_min=5, m_max=30, step=2)
            self.assertIsInstance(solver, PDGMRES)
            self.assertEqual(solver.controller.bounds(100), (5, 30))
            self.assertEqual(solver.controller.step, 2)
            self.assertEqual(solver.controller.alpha_p, -3.0)
            self.assertEqual(solver.controller.alpha_d, 5.0)

    def test_solve(self) -> None:
        mat = convection_diffusion(150, 0.5)
        configs = {"gmres": {"subspace": 20},
                   "pd_gmres": {"subspace": 10, "m_min": 5, "m_max": 30},
                   "lgmres": {"subspace": 17, "augment": 3}}
        for kk in self.krylovkit:
            xp = kk.namespace
            rhs = rand_data(xp, 150, seed=5)
            for method, config in configs.items():
                res = kk.solve(mat, rhs, method=method, nsteps=1000, eps=1e-10, **config)

                self.assertTrue(res.converged)
                self.assertEqual(res.residuals[0], 1.0)
                self.assertLess(res.residuals[-1], 1e-10)
                self.assertLess(norm(rhs - mat @ res.array) / norm(rhs), 1e-8)

    def test_solve_lists(self) -> None:
        res = np_krylovkit.solve([[2.0, 0.0], [0.0, 4.0]], [2.0, 4.0], [0.0, 0.0], method="gmres")
        self.assertTrue(res.converged)
        self.assertAlmostEqual(float(res.array[0]), 1.0)
        self.assertAlmostEqual(float(res.array[1]), 1.0)

    def test_lstsq(self) -> None:
        mat = convection_diffusion(80, 0.5)
        for kk in self.krylovkit:
            xp = kk.namespace
            rhs = xp.ones(80)
            with kk.projection(solver=kk.lstsq()):
                res = kk.solve(mat, rhs, method="lgmres", nsteps=1000, eps=1e-10)
            self.assertTrue(res.converged)
            self.assertLess(norm(rhs - mat @ res.array) / norm(rhs), 1e-8)

    def test_errors(self) -> None:
        for kk in self.krylovkit:
            xp = kk.namespace
            with self.assertRaises(ValueError):
                kk.solve(xp.eye(3), xp.ones(3), method="cg")
            with self.assertRaises(ConfigurationError):
                kk.solve(xp.eye(3), xp.ones(3), method="pd_gmres", subspace=2, m_min=3)

if __name__ == "__main__":
    unittest.main()
