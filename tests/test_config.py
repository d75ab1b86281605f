from astrodefense.backend import AsteroidParameters, DeflectionMethod
from astrodefense.config import Settings, get_settings


def test_get_settings_returns_settings():
    assert isinstance(get_settings(), Settings)


def test_default_parameters_from_settings():
    settings = Settings(
        default_diameter_km=2.5,
        default_velocity_kms=30.0,
        default_angle_deg=60.0,
        default_mass_kg=3e12,
        default_deflection_method="ion",
        default_delta_v_kms=1.5,
    )
    assert settings.default_parameters() == AsteroidParameters(
        diameter=2.5,
        velocity=30.0,
        angle=60.0,
        mass=3e12,
        deflection_method=DeflectionMethod.ION,
        delta_v=1.5,
    )
