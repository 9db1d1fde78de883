"""Example: Run a Bell state on tiny-qvm."""
import numpy as np

from tiny_qvm import Gate, Measure, machine_create, run
from tiny_qvm import gates as g

SHOTS = 1000

print("=" * 50)
print("tiny-qvm: Bell State Example")
print("=" * 50)

program = (Gate(g.H, [0]), Gate(g.CNOT, [0, 1]), Measure())
rng = np.random.default_rng()

counts = {}
for _ in range(SHOTS):
    register = run(program, machine_create(2, rng=rng)).register
    counts[register] = counts.get(register, 0) + 1

print("\nMeasurement Results:")
for index, count in sorted(counts.items()):
    print(f"  |{index:02b}⟩: {count:4d} ({100*count/SHOTS:5.1f}%)")

print("\nExpected: ~50% |00⟩ and ~50% |11⟩ (entangled!)")
