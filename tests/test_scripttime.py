import io
import unittest
from pymidas.distribution import compute_distribution
from pymidas.scripttime import ScriptTime, st


class TestScriptTime(unittest.TestCase):
    def test_profilefn(self):
        timer = ScriptTime(profile=True)

        @timer.profilefn
        def square(x):
            """squares x"""
            return x * x

        self.assertEqual(square(3), 9)
        square(4)
        self.assertEqual(square.__name__, 'square')
        self.assertEqual(square.__doc__, 'squares x')
        called, total, shortest, longest = timer.profiles['square']
        self.assertEqual(called, 2)
        self.assertLessEqual(shortest, longest)
        self.assertLessEqual(longest, total)

        stream = io.StringIO()
        timer.printprofiles(stream)
        self.assertIn('square', stream.getvalue())

        timer.clearprofiles()
        self.assertEqual(timer.profiles, {})

    def test_exception_recorded(self):
        timer = ScriptTime(profile=True)

        @timer.profilefn
        def fail():
            raise KeyError('failed')

        with self.assertRaises(KeyError):
            fail()
        self.assertEqual(timer.profiles['fail'][0], 1)

    def test_disabled(self):
        timer = ScriptTime(profile=False)

        def identity(x):
            return x

        self.assertIs(timer.profilefn(identity), identity)

    def test_elapsed(self):
        timer = ScriptTime()
        timer.triggerend()
        elapsed = timer.elapsed_time
        self.assertGreaterEqual(elapsed, 0.)
        self.assertEqual(timer.elapsed_time, elapsed)
        stream = io.StringIO()
        timer.printelapsed(stream)
        self.assertTrue(stream.getvalue().startswith('Elapsed time'))

    def test_calculation_stages(self):
        compute_distribution({'C': 2, 'H': 3, 'N': 1, 'O': 1})
        for name in ['enumerate_element', 'merge_terms', 'convolve_terms']:
            self.assertIn(name, st.profiles)


if __name__ == '__main__':
    unittest.main()
