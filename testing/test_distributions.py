import unittest

from probtree import flip, bernoulli, uniform, weighted, binomial, geometric, run


class TestDistributions(unittest.TestCase):
    """Built-in distributions and their argument checks."""

    def test_flip_rejects_bad_probability(self):
        for p in (-0.5, 1.01, 2):
            with self.assertRaises(ValueError):
                flip(p)
        with self.assertRaises(TypeError):
            flip("0.5")

    def test_bernoulli(self):
        dist, unknown = run(1, bernoulli(0.2))
        self.assertEqual([x for x, _ in dist], [0, 1])
        self.assertAlmostEqual(dist[0][1], 0.8)
        self.assertAlmostEqual(dist[1][1], 0.2)
        self.assertEqual(unknown, 0.0)

    def test_uniform_rejects_inverted_range(self):
        with self.assertRaises(ValueError):
            uniform(6, 1)

    def test_weighted(self):
        dist, _ = run(1, weighted(["a", "b", "c"], [1, 3, 0]))
        d = dict(dist)
        self.assertAlmostEqual(d["a"], 0.25)
        self.assertAlmostEqual(d["b"], 0.75)
        self.assertAlmostEqual(d["c"], 0.0)

    def test_weighted_rejects_bad_weights(self):
        with self.assertRaises(ValueError):
            weighted(["a", "b"], [1])
        with self.assertRaises(ValueError):
            weighted([], [])
        with self.assertRaises(ValueError):
            weighted(["a", "b"], [1, -1])
        with self.assertRaises(ValueError):
            weighted(["a", "b"], [0, 0])

    def test_binomial(self):
        dist, unknown = run(50, binomial(3, 0.5))
        d = dict(dist)
        self.assertEqual(sorted(d), [0, 1, 2, 3])
        self.assertAlmostEqual(d[0], 1 / 8)
        self.assertAlmostEqual(d[1], 3 / 8)
        self.assertAlmostEqual(d[2], 3 / 8)
        self.assertAlmostEqual(d[3], 1 / 8)
        self.assertEqual(unknown, 0.0)

    def test_binomial_zero_trials(self):
        self.assertEqual(run(0, binomial(0, 0.3)), ([(0, 1.0)], 0.0))

    def test_binomial_rejects_bad_count(self):
        with self.assertRaises(ValueError):
            binomial(-1, 0.5)
        with self.assertRaises(ValueError):
            binomial(2.5, 0.5)

    def test_geometric_rejects_bad_probability(self):
        with self.assertRaises(ValueError):
            geometric(1.5)

    def test_geometric_always_succeeding(self):
        # the failing branch is still explored, but carries no mass
        dist, unknown = run(10, geometric(1.0))
        d = dict(dist)
        self.assertEqual(d[0], 1.0)
        self.assertEqual(sum(p for x, p in dist if x != 0), 0.0)
        self.assertEqual(unknown, 0.0)


if __name__ == '__main__':
    unittest.main()
