import contextlib
import importlib
import io
import os
import tempfile
import unittest
from unittest import mock

import numpy as np
from numpy.testing import assert_allclose

from gravsim import (
    Body,
    Diagnostics,
    SimConfig,
    SimulationValidator,
    SpecializedGenerators,
    Universe,
    parse_universe,
    remove_center_of_mass_velocity,
)
from gravsim import cli, constants

HERE = os.path.dirname(os.path.abspath(__file__))
EARTH_MOON = os.path.join(HERE, os.pardir, "universes", "earth_moon.txt")


class TestUniverse(unittest.TestCase):

    def test_from_bodies_and_views(self):
        uni = Universe.from_bodies([Body(1.0, 2.0, 3.0, 4.0, 5.0, "a.gif"),
                                    Body(-1.0, -2.0, 0.0, 0.0, 6.0, "b.gif")], 10.0)
        self.assertEqual(len(uni), 2)
        self.assertEqual(uni[0].vy, 4.0)
        uni[1].x = 7.5
        self.assertEqual(uni.pos[1, 0], 7.5)
        self.assertEqual(uni[-1].mass, 6.0)
        with self.assertRaises(IndexError):
            uni[2]

    def test_mismatched_arrays_rejected(self):
        with self.assertRaises(ValueError):
            Universe.from_arrays([1.0, 2.0], [[0.0, 0.0]])

    def test_wrongly_shaped_arrays_rejected(self):
        with self.assertRaises(ValueError):
            Universe.from_arrays([1.0, 2.0, 3.0], [[1, 2, 3], [4, 5, 6]])
        with self.assertRaises(ValueError):
            Universe.from_arrays([1.0, 2.0, 3.0], [[0, 0], [1, 1], [2, 2]], [[0, 0, 0]] * 3)
        with self.assertRaises(ValueError):
            Universe.from_arrays([1.0], [[0.0, 0.0]], display_ids=["a.gif", "b.gif"])

    def test_snapshot_is_detached_and_read_only(self):
        uni = Universe.from_arrays([1.0], [[1.0, 1.0]], [[0.5, 0.0]])
        snap = uni.snapshot(3.0)
        uni.pos[0, 0] = 99.0
        self.assertEqual(snap.pos[0, 0], 1.0)
        self.assertEqual(snap.time, 3.0)
        with self.assertRaises(ValueError):
            snap.pos[0, 0] = 2.0


class TestValidator(unittest.TestCase):

    def test_clean_universe(self):
        uni = SpecializedGenerators.equal_mass_ring(3, 1.0, 1.0)
        self.assertTrue(SimulationValidator.universe_is_valid(uni))

    def test_reports_zero_mass_and_coincident_bodies(self):
        uni = Universe.from_arrays([1.0, 0.0, 2.0], [[0.0, 0.0], [1.0, 1.0], [0.0, 0.0]])
        problems = SimulationValidator.problems(uni)
        self.assertEqual(len(problems), 2)
        self.assertIn("body 1", problems[0])
        self.assertIn("bodies 0 and 2", problems[1])

        with contextlib.redirect_stdout(io.StringIO()) as out:
            SimulationValidator.report_invalid_state("demo", uni)
        self.assertTrue(out.getvalue().startswith("[invalid] demo"))


class TestDiagnostics(unittest.TestCase):

    def test_two_body_energy(self):
        uni = Universe.from_arrays([2.0, 3.0], [[0.0, 0.0], [2.0, 0.0]], [[1.0, 0.0], [0.0, 1.0]])
        diag = Diagnostics(uni, G=1.0)
        self.assertEqual(diag.kinetic_energy(), 2.5)
        self.assertEqual(diag.potential_energy(), -3.0)
        assert_allclose(diag.linear_momentum(), [2.0, 3.0])
        self.assertEqual(diag.angular_momentum(), 6.0)

    def test_circular_orbit_is_in_com_frame(self):
        uni = SpecializedGenerators.two_body_circular(5.974e24, 7.348e22, 3.84e8)
        r_cm, v_cm = Diagnostics(uni).center_of_mass()
        self.assertLess(np.max(np.abs(r_cm)), 1e-6)
        self.assertLess(np.max(np.abs(v_cm)), 1e-12)

    def test_remove_com_velocity(self):
        v = remove_center_of_mass_velocity(np.array([1.0, 1.0]), np.array([[2.0, 0.0], [0.0, 0.0]]))
        assert_allclose(v, [[1.0, 0.0], [-1.0, 0.0]])


class TestConfig(unittest.TestCase):

    def test_defaults(self):
        cfg = SimConfig()
        self.assertEqual(cfg.G, 6.674e-11)
        self.assertEqual((cfg.slide_start, cfg.slide_end, cfg.slide_initial), (100, 400, 250))
        self.assertTrue(cfg.is_valid())

    def test_copy_is_independent(self):
        cfg = SimConfig()
        other = cfg.copy()
        other.frame_delay = 0.0
        self.assertNotEqual(cfg.frame_delay, 0.0)

    def test_invalid_configs(self):
        with contextlib.redirect_stdout(io.StringIO()):
            self.assertFalse(SimConfig(slide_start=400, slide_end=100).is_valid())
            self.assertFalse(SimConfig(frame_delay=-1.0).is_valid())
            self.assertFalse(SimConfig(slide_initial=50).is_valid())

    def test_frame_delay_from_environment(self):
        try:
            with mock.patch.dict(os.environ, {"GRAVSIM_FRAME_DELAY_MS": "40"}):
                self.assertEqual(importlib.reload(constants).FRAME_DELAY_MS, 40.0)
            with mock.patch.dict(os.environ, {"GRAVSIM_FRAME_DELAY_MS": "fast"}):
                with contextlib.redirect_stderr(io.StringIO()):
                    self.assertEqual(importlib.reload(constants).FRAME_DELAY_MS, 100.0)
        finally:
            importlib.reload(constants)


class TestCommandLine(unittest.TestCase):

    def run_cli(self, *argv):
        with contextlib.redirect_stdout(io.StringIO()) as out:
            code = cli.main(list(argv))
        return code, out.getvalue()

    def test_prints_final_report(self):
        code, out = self.run_cli("864000", "3600", EARTH_MOON, "--delay-ms", "0")
        self.assertEqual(code, 0)
        lines = out.splitlines()
        self.assertEqual(lines[:2], ["2", "4.80e+08"])
        self.assertTrue(lines[3].endswith("moon.gif"))

    def test_trace_and_progress_keep_report_clean(self):
        with contextlib.redirect_stderr(io.StringIO()) as err:
            code, out = self.run_cli("86400", "3600", EARTH_MOON, "--delay-ms", "0",
                                     "--trace", "--report-every", "1")
        self.assertEqual(code, 0)
        self.assertEqual(out.splitlines()[:2], ["2", "4.80e+08"])
        self.assertIsNotNone(parse_universe(out))
        self.assertIn("[info] step=", err.getvalue())

    def test_csv_output(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "final.csv")
            code, _ = self.run_cli("3600", "3600", EARTH_MOON, "--delay-ms", "0", "--csv", path)
            self.assertEqual(code, 0)
            self.assertTrue(os.path.isfile(path))

    def test_startup_errors(self):
        self.assertEqual(self.run_cli("10", "1", "/nonexistent.txt", "--delay-ms", "0")[0], 1)
        self.assertEqual(self.run_cli("-10", "1", EARTH_MOON, "--delay-ms", "0")[0], 1)
        self.assertEqual(self.run_cli("10", "1", EARTH_MOON, "--delay-ms", "-5")[0], 1)
        code, out = self.run_cli("10", "1", EARTH_MOON, "--delay-ms", "0", "--require-assets")
        self.assertEqual(code, 1)
        self.assertIn("Could not open earth.gif", out)

    def test_validate_rejects_degenerate_universe(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "bad.txt")
            with open(path, "w") as f:
                f.write("2\n1.0e9\n0 0 0 0 1.0e20 a.gif\n0 0 0 0 1.0e20 b.gif\n")
            code, out = self.run_cli("10", "1", path, "--delay-ms", "0", "--validate")
        self.assertEqual(code, 1)
        self.assertIn("[invalid]", out)


if __name__ == "__main__":
    unittest.main()
