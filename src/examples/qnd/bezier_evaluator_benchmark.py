# bezier_evaluator_benchmark.py
# Run with: python bezier_evaluator_benchmark.py

import timeit

import numpy as np

from polycurve.bezier import BezierCurve

# Fixed test curves
P0 = np.array([0.0, 0.0, 0.0])
C0 = np.array([50.0, 200.0, 0.0])
C1 = np.array([150.0, -100.0, 10.0])
P1 = np.array([200.0, 0.0, 0.0])

STEPS_LIST = [8, 16, 32, 64, 128, 256, 1_024]


def quadratic_de_casteljau(steps: int):
    for i in range(steps):
        BezierCurve.evaluate(i / steps, [P0, C0, P1])


def quadratic_closed_form(steps: int):
    for i in range(steps):
        BezierCurve.evaluate_quadratic(i / steps, P0, P1, C0)


def quadratic_sampled(steps: int):
    buffer = np.empty((steps, 3))
    BezierCurve.sample_quadratic_segment_inplace(P0, P1, C0, steps, buffer)


def cubic_de_casteljau(steps: int):
    for i in range(steps):
        BezierCurve.evaluate(i / steps, [P0, C0, C1, P1])


def cubic_closed_form(steps: int):
    for i in range(steps):
        BezierCurve.evaluate_cubic(i / steps, P0, P1, C0, C1)


def cubic_sampled(steps: int):
    buffer = np.empty((steps, 3))
    BezierCurve.sample_cubic_segment_inplace(P0, P1, C0, C1, steps, buffer)


versions = {
    "quadratic": {
        "de Casteljau": quadratic_de_casteljau,
        "closed form": quadratic_closed_form,
        "sampled": quadratic_sampled,
    },
    "cubic": {
        "de Casteljau": cubic_de_casteljau,
        "closed form": cubic_closed_form,
        "sampled": cubic_sampled,
    },
}


def main():
    for degree_name, funcs in versions.items():
        print(f"{degree_name.capitalize()} Bezier evaluation benchmark (lower = better)")
        print("Steps   |  de Casteljau   |   closed form   |     sampled     | Fastest")
        print("-" * 74)

        for steps in STEPS_LIST:
            timings = {}
            # Adjust repeats so each test takes a fraction of a second
            repeats = max(1, 20_000 // steps)

            for name, func in funcs.items():
                t = timeit.timeit(lambda: func(steps), number=repeats)
                timings[name] = t * 1000 / repeats  # milliseconds per call

            fastest_name = min(timings, key=timings.get)
            print(
                f"{steps:6}  |  {timings['de Casteljau']:9.3f} ms  |  {timings['closed form']:9.3f} ms  |"
                f"  {timings['sampled']:9.3f} ms  |  {fastest_name}"
            )
        print()


if __name__ == "__main__":
    main()
