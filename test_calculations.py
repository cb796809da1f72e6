import unittest
from core.calculator import round_half_up
from core.errors import InvalidSelectionError, SizeNotFoundError
from core.models import AirSpacing, ConductorType, InstallationMethod, QueryParameters
from standards.ampacity_logic import AmpacityLogic

class TestCalculations(unittest.TestCase):
    def test_hypalon_conduit_single_conductor(self):
        # 5.5 mm2 in conduit at 25C, 1 conductor -> 61 * 1.0 * 1.0
        params = QueryParameters(ConductorType.HYPALON, "5.5", InstallationMethod.CONDUIT, 25, bundle_key="1")
        res = AmpacityLogic.compute_ampacity(params)

        self.assertEqual(res.base_ampacity, 61)
        self.assertEqual(res.temperature_factor, 1.0)
        self.assertEqual(res.secondary_factor, 1.0)
        self.assertEqual(res.final_ampacity, 61)
        self.assertFalse(res.secondary_defaulted)

    def test_hypalon_conduit_hot_two_conductors(self):
        # 61 * 0.88 * 0.7 = 37.576 -> 38
        params = QueryParameters(ConductorType.HYPALON, "5.5", InstallationMethod.CONDUIT, 40, bundle_key="2")
        res = AmpacityLogic.compute_ampacity(params)

        self.assertEqual(res.base_ampacity, 61)
        self.assertEqual(res.temperature_factor, 0.88)
        self.assertEqual(res.secondary_factor, 0.7)
        self.assertEqual(res.final_ampacity, 38)
        self.assertIn("f2", res.formula)

    def test_hypalon_open_air_spacing(self):
        # 104 * 1.1 * 0.9 = 102.96 -> 103
        params = QueryParameters(ConductorType.HYPALON, "14", InstallationMethod.OPEN_AIR, 30,
                                 air_spacing=AirSpacing.S_2D, air_count=4)
        res = AmpacityLogic.compute_ampacity(params)

        self.assertEqual(res.base_ampacity, 104)
        self.assertEqual(res.temperature_factor, 1.1)
        self.assertEqual(res.secondary_factor, 0.9)
        self.assertEqual(res.final_ampacity, 103)
        self.assertIn("f4", res.formula)

    def test_pvc_tables(self):
        # 450 * 0.87 * 0.49 = 191.835 -> 192
        params = QueryParameters(ConductorType.PVC, "100", InstallationMethod.CONDUIT, 45, bundle_key="7-15")
        self.assertEqual(AmpacityLogic.compute_ampacity(params).final_ampacity, 192)

        # 768 * 1.07 * 0.85 = 698.496 -> 698
        params = QueryParameters(ConductorType.PVC, "250", InstallationMethod.OPEN_AIR, 30,
                                 air_spacing=AirSpacing.S_3D, air_count=12)
        self.assertEqual(AmpacityLogic.compute_ampacity(params).final_ampacity, 698)

    def test_size_not_found(self):
        # PVC table starts at 1.25 mm2
        params = QueryParameters(ConductorType.PVC, "0.75", InstallationMethod.CONDUIT)
        with self.assertRaises(SizeNotFoundError) as ctx:
            AmpacityLogic.compute_ampacity(params)
        self.assertEqual(ctx.exception.size, "0.75")
        self.assertIs(ctx.exception.conductor_type, ConductorType.PVC)

        # Labels are matched as text
        params = QueryParameters(ConductorType.HYPALON, "2", InstallationMethod.OPEN_AIR)
        with self.assertRaises(LookupError):
            AmpacityLogic.compute_ampacity(params)

    def test_non_multiple_temperature(self):
        # 27C -> 25C key
        params = QueryParameters(ConductorType.HYPALON, "5.5", InstallationMethod.CONDUIT, 27)
        res = AmpacityLogic.compute_ampacity(params)
        self.assertEqual(res.resolved_temp_c, 25)
        self.assertEqual(res.temperature_factor, 1.0)

        params.ambient_temp_c = 27.5
        res = AmpacityLogic.compute_ampacity(params)
        self.assertEqual(res.resolved_temp_c, 30)
        self.assertEqual(res.temperature_factor, 0.96)

    def test_out_of_range_temperature_clamps(self):
        for c_type in ConductorType:
            for method in InstallationMethod:
                size = AmpacityLogic.size_labels(c_type)[0]
                cold = AmpacityLogic.compute_ampacity(QueryParameters(c_type, size, method, 5))
                at_20 = AmpacityLogic.compute_ampacity(QueryParameters(c_type, size, method, 20))
                hot = AmpacityLogic.compute_ampacity(QueryParameters(c_type, size, method, 100))
                at_50 = AmpacityLogic.compute_ampacity(QueryParameters(c_type, size, method, 50))
                self.assertEqual(cold.temperature_factor, at_20.temperature_factor)
                self.assertEqual(hot.temperature_factor, at_50.temperature_factor)

    def test_pure_function(self):
        params = QueryParameters(ConductorType.PVC, "38", InstallationMethod.OPEN_AIR, 33,
                                 air_spacing=AirSpacing.S_D, air_count=6)
        first = AmpacityLogic.compute_ampacity(params)
        AmpacityLogic.compute_ampacity(QueryParameters(ConductorType.HYPALON, "400", InstallationMethod.CONDUIT, 50))
        self.assertEqual(first, AmpacityLogic.compute_ampacity(params))

    def test_ampacity_decreases_with_heat(self):
        temps = AmpacityLogic.temperature_keys()
        for c_type in ConductorType:
            for method in InstallationMethod:
                for size in AmpacityLogic.size_labels(c_type):
                    amps = [
                        AmpacityLogic.compute_ampacity(QueryParameters(c_type, size, method, t)).final_ampacity
                        for t in temps
                    ]
                    for hotter, cooler in zip(amps[1:], amps[:-1]):
                        self.assertLessEqual(hotter, cooler, f"{c_type} {size} {method}")

    def test_single_conductor_keeps_base_times_temperature(self):
        for size in AmpacityLogic.size_labels(ConductorType.HYPALON):
            for t in AmpacityLogic.temperature_keys():
                params = QueryParameters(ConductorType.HYPALON, size, InstallationMethod.CONDUIT, t, bundle_key="1")
                res = AmpacityLogic.compute_ampacity(params)
                self.assertEqual(res.final_ampacity, round_half_up(res.base_ampacity * res.temperature_factor))

    def test_round_half_up(self):
        self.assertEqual(round_half_up(36.5), 37)
        self.assertEqual(round_half_up(0.5), 1)
        self.assertEqual(round_half_up(102.96), 103)
        self.assertEqual(round_half_up(37.4), 37)

class TestInvalidSelection(unittest.TestCase):
    def test_invalid_bundle_defaults_to_one(self):
        params = QueryParameters(ConductorType.HYPALON, "8", InstallationMethod.CONDUIT, 25, bundle_key="99")
        with self.assertLogs("core.calculator", level="WARNING"):
            res = AmpacityLogic.compute_ampacity(params)
        self.assertEqual(res.secondary_factor, 1.0)
        self.assertTrue(res.secondary_defaulted)
        self.assertEqual(res.final_ampacity, 76)

    def test_invalid_air_count_defaults_to_one(self):
        # 5 cables is not a column of the f4 table
        params = QueryParameters(ConductorType.HYPALON, "8", InstallationMethod.OPEN_AIR, 40,
                                 air_spacing=AirSpacing.S_D, air_count=5)
        res = AmpacityLogic.compute_ampacity(params)
        self.assertTrue(res.secondary_defaulted)
        self.assertEqual(res.final_ampacity, 69)

    def test_strict_mode_raises(self):
        params = QueryParameters(ConductorType.PVC, "8", InstallationMethod.CONDUIT, 25, bundle_key="5")
        with self.assertRaises(InvalidSelectionError) as ctx:
            AmpacityLogic.compute_ampacity(params, strict=True)
        self.assertEqual(ctx.exception.selection, "5")

        params = QueryParameters(ConductorType.PVC, "8", InstallationMethod.OPEN_AIR, 25, air_count=7)
        with self.assertRaises(InvalidSelectionError):
            AmpacityLogic.compute_ampacity(params, strict=True)

    def test_size_error_is_not_softened(self):
        params = QueryParameters(ConductorType.PVC, "400", InstallationMethod.CONDUIT, bundle_key="99")
        with self.assertRaises(SizeNotFoundError):
            AmpacityLogic.compute_ampacity(params)

class TestFacade(unittest.TestCase):
    def test_enumerations(self):
        self.assertEqual(AmpacityLogic.conductor_types(), [ConductorType.HYPALON, ConductorType.PVC])
        self.assertEqual(AmpacityLogic.temperature_keys(), [20, 25, 30, 35, 40, 45, 50])
        self.assertEqual(AmpacityLogic.bundle_keys(),
                         ["1", "2", "3", "4", "5-6", "7-15", "16-40", "41-60", "60+"])
        self.assertEqual(AmpacityLogic.air_counts(), [1, 2, 3, 4, 6, 8, 9, 12])
        self.assertEqual([s.value for s in AmpacityLogic.air_spacings()], ["S=d", "S=2d", "S=3d"])
        self.assertEqual(len(AmpacityLogic.size_labels(ConductorType.HYPALON)), 20)
        self.assertEqual(len(AmpacityLogic.size_labels(ConductorType.PVC)), 18)

    def test_enumerated_choices_never_default(self):
        for c_type in AmpacityLogic.conductor_types():
            size = AmpacityLogic.size_labels(c_type)[-1]
            for key in AmpacityLogic.bundle_keys():
                params = QueryParameters(c_type, size, InstallationMethod.CONDUIT, bundle_key=key)
                self.assertFalse(AmpacityLogic.compute_ampacity(params, strict=True).secondary_defaulted)
            for spacing in AmpacityLogic.air_spacings():
                for n in AmpacityLogic.air_counts():
                    params = QueryParameters(c_type, size, InstallationMethod.OPEN_AIR,
                                             air_spacing=spacing, air_count=n)
                    self.assertFalse(AmpacityLogic.compute_ampacity(params, strict=True).secondary_defaulted)

    def test_default_size_on_type_switch(self):
        self.assertEqual(AmpacityLogic.default_size(ConductorType.PVC, "0.75"), "1.25")
        self.assertEqual(AmpacityLogic.default_size(ConductorType.PVC, "5.5"), "5.5")
        self.assertEqual(AmpacityLogic.default_size(ConductorType.HYPALON), "0.75")

    def test_ampacity_table(self):
        params = QueryParameters(ConductorType.PVC, "ignored", InstallationMethod.CONDUIT, 40, bundle_key="2")
        rows = AmpacityLogic.ampacity_table(params)
        self.assertEqual(len(rows), 18)
        self.assertEqual(rows[0][0], "1.25")
        # 23 * 0.9 * 0.7 = 14.49 -> 14
        self.assertEqual(rows[0][1].final_ampacity, 14)
        # Caller's parameters are untouched
        self.assertEqual(params.size, "ignored")

    def test_spacing_factor_options(self):
        options = AmpacityLogic.spacing_factor_options(AirSpacing.S_2D)
        self.assertEqual(options[3], (4, 0.9))
        self.assertEqual(len(options), 8)

if __name__ == '__main__':
    unittest.main()
