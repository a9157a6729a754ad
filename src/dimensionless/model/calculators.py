"""
Formula Registry
================
The catalog of dimensionless-number calculators.

Each calculator is a frozen `CalculatorDefinition` holding its input fields,
a formula and a classifier. The set is closed: all ten definitions are
registered when this module is imported and never change afterwards.

Formulas run on numpy float64 scalars, so a zero denominator gives ±inf and
the square root of a negative number gives NaN instead of raising.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Callable, Dict, List, Mapping, Optional, Tuple
import logging

import numpy as np

from dimensionless.model.errors import UnknownCalculatorError
from dimensionless.model.formatting import format_fixed
from dimensionless.model.i18n import LocalizedText

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------------------
# Enums
# ------------------------------------------------------------------------------
class CalculatorKey(StrEnum):
    REYNOLDS = "reynolds"
    MACH = "mach"
    NUSSELT = "nusselt"
    PRANDTL = "prandtl"
    SCHMIDT = "schmidt"
    PECLET = "peclet"
    STROUHAL = "strouhal"
    FROUDE = "froude"
    WEBER = "weber"
    KNUDSEN = "knudsen"


class Regime(StrEnum):
    """Stable keys of the threshold classifications."""
    LAMINAR = "laminar"
    TRANSITIONAL = "transitional"
    TURBULENT = "turbulent"

    SUBSONIC = "subsonic"
    TRANSONIC = "transonic"
    SUPERSONIC = "supersonic"
    HYPERSONIC = "hypersonic"

    SUBCRITICAL = "subcritical"
    CRITICAL = "critical"
    SUPERCRITICAL = "supercritical"

    CONTINUUM = "continuum"
    SLIP = "slip"
    TRANSITION_FREE_MOLECULAR = "transition/free-molecular"


# ------------------------------------------------------------------------------
# Data Structures
# ------------------------------------------------------------------------------
@dataclass(frozen=True)
class InputField:
    key: str
    label: LocalizedText
    placeholder: LocalizedText


@dataclass(frozen=True)
class Classification:
    """Regime label of a computed value. `regime` is None for descriptive-only calculators."""
    regime: Optional[Regime]
    text: LocalizedText


Formula = Callable[[Mapping[str, np.float64]], np.float64]
Classifier = Callable[[float], Classification]


@dataclass(frozen=True)
class CalculatorDefinition:
    key: CalculatorKey
    symbol: str
    title: LocalizedText
    inputs: Tuple[InputField, ...]
    formula: Formula = field(repr=False)
    classifier: Classifier = field(repr=False)
    description: Optional[LocalizedText] = None

    def __post_init__(self) -> None:
        keys = self.field_keys
        if len(set(keys)) != len(keys):
            raise ValueError(f"Calculator '{self.key}' declares duplicate input keys: {keys}")

    @property
    def field_keys(self) -> Tuple[str, ...]:
        return tuple(f.key for f in self.inputs)

    def compute(self, values: Mapping[str, float]) -> float:
        """Evaluate the formula on a complete set of inputs."""
        args = {k: np.float64(values[k]) for k in self.field_keys}
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            return float(self.formula(args))

    def classify(self, value: float) -> Classification:
        return self.classifier(value)


# ------------------------------------------------------------------------------
# Registry
# ------------------------------------------------------------------------------
_REGISTRY: Dict[str, CalculatorDefinition] = {}


def register_calculator(definition: CalculatorDefinition) -> CalculatorDefinition:
    """Add a definition to the registry under its key."""
    if definition.key in _REGISTRY:
        raise ValueError(f"Calculator '{definition.key}' is already registered")
    _REGISTRY[definition.key] = definition
    logger.debug(f"Registered calculator '{definition.key}'")
    return definition


def get_calculator(key: str) -> CalculatorDefinition:
    definition = _REGISTRY.get(key)
    if definition is None:
        raise UnknownCalculatorError(key)
    return definition


def calculator_keys() -> List[str]:
    return list(_REGISTRY.keys())


def all_calculators() -> List[CalculatorDefinition]:
    return list(_REGISTRY.values())


# ------------------------------------------------------------------------------
# Shared labels
# ------------------------------------------------------------------------------
def _example(value: str) -> LocalizedText:
    return LocalizedText(en=f"e.g. {value}", ko=f"예: {value}")


VELOCITY = LocalizedText(en="Velocity (v) [m/s]", ko="속도 (v) [m/s]")
DENSITY = LocalizedText(en="Density (ρ) [kg/m³]", ko="밀도 (ρ) [kg/m³]")
LENGTH = LocalizedText(en="Characteristic Length (L) [m]", ko="특성 길이 (L) [m]")
DYNAMIC_VISCOSITY = LocalizedText(en="Dynamic Viscosity (μ) [Pa·s]", ko="점성 계수 (μ) [Pa·s]")
CONDUCTIVITY = LocalizedText(en="Thermal Conductivity (k) [W/mK]", ko="열전도율 (k) [W/mK]")


# ------------------------------------------------------------------------------
# Classifiers
# ------------------------------------------------------------------------------
def _regime(regime: Regime, en: str, ko: str) -> Classification:
    return Classification(regime=regime, text=LocalizedText(en=f"{en} ({ko})", ko=f"{ko} ({en})"))


def classify_reynolds(value: float) -> Classification:
    if value < 2300:
        return _regime(Regime.LAMINAR, "Laminar Flow", "층류")
    if value > 4000:
        return _regime(Regime.TURBULENT, "Turbulent Flow", "난류")
    return _regime(Regime.TRANSITIONAL, "Transitional Flow", "천이 구역")


def classify_mach(value: float) -> Classification:
    if value < 0.8:
        return _regime(Regime.SUBSONIC, "Subsonic", "아음속")
    if value < 1.2:
        return _regime(Regime.TRANSONIC, "Transonic", "천음속")
    if value < 5.0:
        return _regime(Regime.SUPERSONIC, "Supersonic", "초음속")
    return _regime(Regime.HYPERSONIC, "Hypersonic", "극초음속")


def classify_froude(value: float) -> Classification:
    if value < 1:
        return _regime(Regime.SUBCRITICAL, "Subcritical flow", "상류")
    if value == 1:
        return _regime(Regime.CRITICAL, "Critical flow", "한계류")
    return _regime(Regime.SUPERCRITICAL, "Supercritical flow", "사류")


def classify_knudsen(value: float) -> Classification:
    if value < 0.01:
        return _regime(Regime.CONTINUUM, "Continuum flow", "연속체 유동")
    if value < 0.1:
        return _regime(Regime.SLIP, "Slip flow", "미끄럼 유동")
    return _regime(Regime.TRANSITION_FREE_MOLECULAR, "Transition/Free molecular flow", "천이/자유 분자 유동")


def classify_prandtl(value: float) -> Classification:
    approx = format_fixed(value, 1)
    return Classification(
        regime=None,
        text=LocalizedText(
            en=f"Pr ≈ {approx}: Fluid property characteristic.",
            ko=f"Pr ≈ {approx}: 유체 고유의 물성치입니다.",
        ),
    )


def _describe(en: str, ko: str) -> Classifier:
    """Classifier that ignores the value and always returns the same sentence."""
    classification = Classification(regime=None, text=LocalizedText(en=en, ko=ko))

    def classify(value: float) -> Classification:
        return classification

    return classify


# ------------------------------------------------------------------------------
# Catalog
# ------------------------------------------------------------------------------
register_calculator(CalculatorDefinition(
    key=CalculatorKey.REYNOLDS,
    symbol="Re",
    title=LocalizedText(en="Reynolds Number", ko="레이놀즈 수"),
    description=LocalizedText(
        en=(
            "The Reynolds number is one of the most important dimensionless numbers in fluid "
            "mechanics. It is the ratio of inertial to viscous forces and predicts whether a flow "
            "is laminar or turbulent.<br><br><strong>Formula:</strong> Re = ρvL / μ<br>"
            "where ρ is the density, v the velocity, L the characteristic length and μ the "
            "dynamic viscosity.<br><br>In pipe flow, Re &lt; 2300 is usually laminar and "
            "Re &gt; 4000 turbulent; the range in between is transitional."
        ),
        ko=(
            "레이놀즈 수(Reynolds Number)는 유체 역학에서 가장 중요한 무차원수 중 하나로, 관성력과 "
            "점성력의 비를 나타냅니다. 이 수는 유동이 층류(Laminar)인지 난류(Turbulent)인지를 "
            "예측하는 데 사용됩니다.<br><br><strong>공식:</strong> Re = ρvL / μ<br>여기서 ρ는 밀도, "
            "v는 속도, L은 특성 길이, μ는 점성 계수입니다.<br><br>일반적으로 파이프 유동에서 "
            "Re &lt; 2300이면 층류, Re &gt; 4000이면 난류로 간주하며, 그 사이는 천이 구역입니다."
        ),
    ),
    inputs=(
        InputField("v", VELOCITY, _example("2.0")),
        InputField("rho", DENSITY, _example("1000")),
        InputField("L", LENGTH, _example("0.5")),
        InputField("mu", DYNAMIC_VISCOSITY, _example("0.001")),
    ),
    formula=lambda x: (x["rho"] * x["v"] * x["L"]) / x["mu"],
    classifier=classify_reynolds,
))

register_calculator(CalculatorDefinition(
    key=CalculatorKey.MACH,
    symbol="Ma",
    title=LocalizedText(en="Mach Number", ko="마하 수"),
    description=LocalizedText(
        en=(
            "The Mach number is the ratio of the flow velocity to the local speed of sound. It is "
            "the key indicator of compressibility effects in high-speed aerodynamics."
            "<br><br><strong>Formula:</strong> Ma = v / c<br>Ma &lt; 1 is subsonic and Ma &gt; 1 "
            "supersonic. Supersonic flows can contain discontinuities such as shock waves."
        ),
        ko=(
            "마하 수(Mach Number)는 유체의 속도와 그 매질에서의 음속의 비를 나타냅니다. 고속 "
            "공기역학에서 압축성 효과를 고려할 때 필수적인 지표입니다.<br><br><strong>공식:</strong> "
            "Ma = v / c<br>Ma &lt; 1 은 아음속, Ma &gt; 1 은 초음속을 의미합니다. 초음속 유동에서는 "
            "충격파(Shock wave)와 같은 불연속적인 현상이 발생할 수 있습니다."
        ),
    ),
    inputs=(
        InputField("v", LocalizedText(en="Flow Velocity (v) [m/s]", ko="유속 (v) [m/s]"), _example("340")),
        InputField("c", LocalizedText(en="Speed of Sound (c) [m/s]", ko="음속 (c) [m/s]"), _example("340")),
    ),
    formula=lambda x: x["v"] / x["c"],
    classifier=classify_mach,
))

register_calculator(CalculatorDefinition(
    key=CalculatorKey.NUSSELT,
    symbol="Nu",
    title=LocalizedText(en="Nusselt Number", ko="누셀트 수"),
    description=LocalizedText(
        en=(
            "The Nusselt number is the ratio of convective to conductive heat transfer across a "
            "boundary. Larger values mean convection transfers heat more effectively."
            "<br><br><strong>Formula:</strong> Nu = hL / k<br>where h is the convective heat "
            "transfer coefficient, L the characteristic length and k the thermal conductivity of "
            "the fluid. Nu = 1 is close to pure conduction."
        ),
        ko=(
            "누셀트 수(Nusselt Number)는 경계면에서의 대류 열전달과 전도 열전달의 비율을 나타냅니다. "
            "이 값이 클수록 대류에 의한 열전달이 활발함을 의미합니다.<br><br><strong>공식:</strong> "
            "Nu = hL / k<br>여기서 h는 대류 열전달 계수, L은 특성 길이, k는 유체의 열전도율입니다. "
            "Nu = 1 이면 순수 전도만 일어나는 상태에 가깝습니다."
        ),
    ),
    inputs=(
        InputField(
            "h",
            LocalizedText(en="Convective Heat Transfer Coeff (h) [W/m²K]", ko="대류 열전달 계수 (h) [W/m²K]"),
            _example("50"),
        ),
        InputField("L", LENGTH, _example("0.1")),
        InputField("k", CONDUCTIVITY, _example("0.6")),
    ),
    formula=lambda x: (x["h"] * x["L"]) / x["k"],
    classifier=_describe(
        "Nu > 1: Convection is more effective than conduction.",
        "Nu > 1: 대류가 전도보다 효과적으로 열을 전달합니다.",
    ),
))

register_calculator(CalculatorDefinition(
    key=CalculatorKey.PRANDTL,
    symbol="Pr",
    title=LocalizedText(en="Prandtl Number", ko="프란틀 수"),
    description=LocalizedText(
        en=(
            "The Prandtl number is the ratio of momentum diffusivity (viscosity) to thermal "
            "diffusivity. It depends only on fluid properties and compares the thicknesses of the "
            "velocity and thermal boundary layers.<br><br><strong>Formula:</strong> "
            "Pr = μc_p / k = ν / α"
        ),
        ko=(
            "프란틀 수(Prandtl Number)는 운동량 확산(점성)과 열 확산(열전도)의 비율을 나타내는 "
            "무차원수입니다. 이는 유체의 고유한 물성치로 결정되며, 속도 경계층과 온도 경계층의 상대적 "
            "두께를 비교하는 데 사용됩니다.<br><br><strong>공식:</strong> Pr = μc_p / k = ν / α"
        ),
    ),
    inputs=(
        InputField("mu", DYNAMIC_VISCOSITY, _example("0.001")),
        InputField(
            "cp",
            LocalizedText(en="Specific Heat Capacity (c_p) [J/kgK]", ko="비열 (c_p) [J/kgK]"),
            _example("4180"),
        ),
        InputField("k", CONDUCTIVITY, _example("0.6")),
    ),
    formula=lambda x: (x["mu"] * x["cp"]) / x["k"],
    classifier=classify_prandtl,
))

register_calculator(CalculatorDefinition(
    key=CalculatorKey.SCHMIDT,
    symbol="Sc",
    title=LocalizedText(en="Schmidt Number", ko="슈미트 수"),
    description=LocalizedText(
        en=(
            "The Schmidt number is the ratio of momentum diffusivity (viscosity) to mass "
            "diffusivity. It is the mass-transfer counterpart of the Prandtl number and sets the "
            "relative thickness of the velocity and concentration boundary layers."
            "<br><br><strong>Formula:</strong> Sc = μ / (ρD)"
        ),
        ko=(
            "슈미트 수(Schmidt Number)는 운동량 확산율(점성)과 질량 확산율의 비를 나타냅니다. 프란틀 "
            "수의 질량 전달 대응물이라고 볼 수 있으며, 속도 경계층과 농도 경계층의 상대적 두께를 "
            "결정합니다.<br><br><strong>공식:</strong> Sc = μ / (ρD)"
        ),
    ),
    inputs=(
        InputField("mu", DYNAMIC_VISCOSITY, _example("0.001")),
        InputField("rho", DENSITY, _example("1000")),
        InputField("D", LocalizedText(en="Mass Diffusivity (D) [m²/s]", ko="질량 확산 계수 (D) [m²/s]"), _example("1e-9")),
    ),
    formula=lambda x: x["mu"] / (x["rho"] * x["D"]),
    classifier=_describe(
        "Sc relates momentum and mass diffusivity.",
        "Sc는 운동량 확산과 질량 확산의 관계를 나타냅니다.",
    ),
))

register_calculator(CalculatorDefinition(
    key=CalculatorKey.PECLET,
    symbol="Pe",
    title=LocalizedText(en="Peclet Number", ko="페클레 수"),
    description=LocalizedText(
        en=(
            "The Peclet number is the ratio of advective transport by the flow to diffusive "
            "transport. It measures how important convection is in heat and mass transfer "
            "problems.<br><br><strong>Formula:</strong> Pe = vL / α"
        ),
        ko=(
            "페클레 수(Peclet Number)는 유동에 의한 이송(Advection)과 확산(Diffusion)의 비율을 "
            "나타냅니다. 열전달이나 질량전달 문제에서 대류의 중요성을 판단하는 척도가 됩니다."
            "<br><br><strong>공식:</strong> Pe = vL / α"
        ),
    ),
    inputs=(
        InputField("v", VELOCITY, _example("2.0")),
        InputField("L", LENGTH, _example("0.5")),
        InputField(
            "alpha",
            LocalizedText(en="Thermal Diffusivity (α) [m²/s]", ko="열확산율 (α) [m²/s]"),
            _example("1e-7"),
        ),
    ),
    formula=lambda x: (x["v"] * x["L"]) / x["alpha"],
    classifier=_describe(
        "Pe > 100: Advection dominates over diffusion.",
        "Pe > 100: 이송이 확산보다 지배적입니다.",
    ),
))

register_calculator(CalculatorDefinition(
    key=CalculatorKey.STROUHAL,
    symbol="St",
    title=LocalizedText(en="Strouhal Number", ko="스트로할 수"),
    description=LocalizedText(
        en=(
            "The Strouhal number characterises oscillations in unsteady flow, for example a "
            "cable vibrating in the wind or a Kármán vortex street.<br><br>"
            "<strong>Formula:</strong> St = fL / v"
        ),
        ko=(
            "스트로할 수(Strouhal Number)는 비정상 유동(Unsteady flow)에서의 진동 특성을 나타냅니다. "
            "예를 들어, 바람에 흔들리는 전선이나 카르만 와류(Karman Vortex Street) 현상을 분석할 때 "
            "중요합니다.<br><br><strong>공식:</strong> St = fL / v"
        ),
    ),
    inputs=(
        InputField(
            "f",
            LocalizedText(en="Frequency of vortex shedding (f) [Hz]", ko="와류 방출 주파수 (f) [Hz]"),
            _example("10"),
        ),
        InputField("L", LENGTH, _example("0.1")),
        InputField("v", VELOCITY, _example("5")),
    ),
    formula=lambda x: (x["f"] * x["L"]) / x["v"],
    classifier=_describe(
        "St represents non-steady flow oscillations.",
        "St는 비정상 유동의 진동 특성을 나타냅니다.",
    ),
))

register_calculator(CalculatorDefinition(
    key=CalculatorKey.FROUDE,
    symbol="Fr",
    title=LocalizedText(en="Froude Number", ko="프루드 수"),
    description=LocalizedText(
        en=(
            "The Froude number is the ratio of inertial to gravitational forces. It is essential "
            "for open-channel flow and for the wave resistance of ships."
            "<br><br><strong>Formula:</strong> Fr = v / √(gL)"
        ),
        ko=(
            "프루드 수(Froude Number)는 유체의 관성력과 중력의 비율을 나타냅니다. 개수로(Open "
            "channel) 유동이나 선박의 조파 저항 등을 해석할 때 필수적인 무차원수입니다."
            "<br><br><strong>공식:</strong> Fr = v / √(gL)"
        ),
    ),
    inputs=(
        InputField("v", VELOCITY, _example("3.0")),
        InputField("L", LENGTH, _example("5.0")),
        InputField("g", LocalizedText(en="Gravity (g) [m/s²]", ko="중력 가속도 (g) [m/s²]"), LocalizedText.same("9.81")),
    ),
    formula=lambda x: x["v"] / np.sqrt(x["g"] * x["L"]),
    classifier=classify_froude,
))

register_calculator(CalculatorDefinition(
    key=CalculatorKey.WEBER,
    symbol="We",
    title=LocalizedText(en="Weber Number", ko="웨버 수"),
    description=LocalizedText(
        en=(
            "The Weber number is the ratio of inertia to surface tension. It is used for "
            "multiphase flows where surface tension matters, such as inkjet printing, fuel "
            "injection and bubble formation.<br><br><strong>Formula:</strong> We = ρv²L / σ"
        ),
        ko=(
            "웨버 수(Weber Number)는 관성력과 표면장력의 비율을 나타냅니다. 잉크젯 프린팅, 연료 분사, "
            "기포 형성 등 표면장력이 중요한 다상 유동에서 주로 사용됩니다.<br><br>"
            "<strong>공식:</strong> We = ρv²L / σ"
        ),
    ),
    inputs=(
        InputField("rho", DENSITY, _example("1000")),
        InputField("v", VELOCITY, _example("2.0")),
        InputField("L", LENGTH, _example("0.01")),
        InputField("sigma", LocalizedText(en="Surface Tension (σ) [N/m]", ko="표면장력 (σ) [N/m]"), _example("0.072")),
    ),
    formula=lambda x: (x["rho"] * x["v"] ** 2 * x["L"]) / x["sigma"],
    classifier=_describe(
        "We relates inertia to surface tension.",
        "We는 관성력과 표면장력의 관계를 나타냅니다.",
    ),
))

register_calculator(CalculatorDefinition(
    key=CalculatorKey.KNUDSEN,
    symbol="Kn",
    title=LocalizedText(en="Knudsen Number", ko="누센 수"),
    description=LocalizedText(
        en=(
            "The Knudsen number is the ratio of the molecular mean free path to the characteristic "
            "length of the system. When it is very small (Kn &lt; 0.01) the fluid can be treated "
            "as a continuum; larger values call for rarefied gas dynamics."
            "<br><br><strong>Formula:</strong> Kn = λ / L"
        ),
        ko=(
            "누센 수(Knudsen Number)는 분자의 평균 자유 행로와 시스템의 특성 길이의 비율입니다. 이 "
            "수가 매우 작으면(Kn &lt; 0.01) 유체를 연속체로 가정할 수 있지만, 크면 희박 기체 "
            "역학(Rarefied Gas Dynamics)을 적용해야 합니다.<br><br><strong>공식:</strong> Kn = λ / L"
        ),
    ),
    inputs=(
        InputField("lambda", LocalizedText(en="Mean Free Path (λ) [m]", ko="평균 자유 행로 (λ) [m]"), _example("6.8e-8")),
        InputField("L", LENGTH, _example("0.001")),
    ),
    formula=lambda x: x["lambda"] / x["L"],
    classifier=classify_knudsen,
))
