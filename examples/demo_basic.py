#!/usr/bin/env python3
"""
Basic PIDF Graph Demo

Demonstrates:
- Configuring gains and target band
- Recording a simulated heading-control loop at 50 Hz
- Saving the chart and data sheet
- Reading the data sheet back
"""

import logging
import sys
from pathlib import Path

import numpy as np

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from pidf_graph import PIDFGraph, read_report


def simulate_heading(graph: PIDFGraph, target: float, tolerance: float, seconds: float = 6.0) -> int:
    """
    Drive a first-order turning model with a PID loop, recording each cycle.

    Returns:
        Number of cycles run
    """
    dt = graph.step
    tau = 0.4            # Chassis time constant (s)
    rate_gain = 120.0    # deg/s at full output
    rng = np.random.default_rng(1943)

    heading = 0.0
    rate = 0.0
    integral = 0.0
    prev_error = target - heading
    cycles = 0

    while cycles * dt < seconds:
        measured = heading + rng.normal(0.0, 0.02)
        graph.add(measured)
        cycles += 1

        error = target - measured
        integral += error * dt
        derivative = (error - prev_error) / dt
        prev_error = error
        output = graph.p * error + graph.i * integral + graph.d * derivative + graph.f
        output = float(np.clip(output, -1.0, 1.0))

        rate += (rate_gain * output - rate) * dt / tau
        heading += rate * dt

        if abs(error) < tolerance and abs(rate) < 1.0:
            break

    return cycles


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("=" * 60)
    print("Basic PIDF Graph Demo")
    print("=" * 60)

    target = 90.0
    tolerance = 5.0

    graph = PIDFGraph()
    graph.configure(0.1, 0.03, 0.7)
    graph.configure_target(target, tolerance)
    graph.configure_resolution(900, 500)

    print(f"\nRecorder: {graph}")

    simulate_heading(graph, target, tolerance)
    print(f"Recorded {len(graph)} samples over {graph.time_cursor:.2f} s")

    output_dir = Path("output/basic_demo")
    output_dir.mkdir(parents=True, exist_ok=True)

    result = graph.save(output_dir)
    if not result.ok:
        print(f"Save failed: {result.error}")
        return 1

    data = read_report(output_dir)
    print(f"\nSaved files: {', '.join(str(p) for p in result.files)}")
    print(f"Final value: {data.values[-1]:.2f} (target {data.target.setpoint} ± {data.target.tolerance})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
