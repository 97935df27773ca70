import unittest
import numpy as np
import array_api_compat as api

from krylovkit.backend import get_namespace, namespace_of_arrays, size, device, to_device, as_floating
from krylovkit.errors import ConfigurationError
from utils import backends, rand_data

class TestBackend(unittest.TestCase):

    def setUp(self):
        self.backends = backends

    def test_namespace(self) -> None:
        self.assertIs(get_namespace(np), api.array_namespace(np.zeros(1)))
        for xp in self.backends:
            vec = rand_data(xp, 6)
            self.assertIs(get_namespace(xp), xp)
            self.assertIs(get_namespace(vec), xp)
            self.assertIs(namespace_of_arrays(vec, xp.ones(6)), xp)
        with self.assertRaises(TypeError):
            get_namespace(object())

    def test_arrays(self) -> None:
        for xp in self.backends:
            mat = rand_data(xp, 3, 4)
            self.assertEqual(size(mat), 12)
            moved = to_device(mat, device(mat))
            self.assertTrue(xp.all(xp.equal(moved, mat)))

    def test_as_floating(self) -> None:
        for xp in self.backends:
            vec = as_floating(xp.asarray([1, 2, 3]))
            self.assertTrue(xp.isdtype(vec.dtype, "real floating"))
            with self.assertRaises(ConfigurationError):
                as_floating(xp.asarray([1.0 + 2.0j, 0.0]))

if __name__ == "__main__":
    unittest.main()
