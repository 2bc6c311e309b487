from dataclasses import dataclass

from point_kinematics.kinematics import MotionParameters

# === Worked example: x = 0.43 t^2 - 1.26, y = sqrt(0.72 t^3 + 0.75) ===
A = 0.43
B = -1.26
C = 0.72
D = 0.75

T1 = 0.65          # highlighted instant [s]
SCALE = 3.0        # smaller side of the plotted trajectory
N_STEPS = 20       # trajectory has N_STEPS + 1 samples

REPORT_FILE = "KonstantynovYP_113_K1_v1.2.txt"


@dataclass(frozen=True)
class RunConfig:
    a: float = A
    b: float = B
    c: float = C
    d: float = D
    t1: float = T1
    scale: float = SCALE
    n: int = N_STEPS
    report_path: str = REPORT_FILE
    csv_path: str = None
    save_dir: str = None
    show: bool = True

    @property
    def parameters(self):
        return MotionParameters(self.a, self.b, self.c, self.d)
