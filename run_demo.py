"""Demo script: run the default mission headless and print the staging timeline."""
from ascent_sim import run_simulation
import numpy as np

result = run_simulation()
log = result.log

print("\n===== ASCENT SUMMARY =====")
print(f"Termination: {result.reason}")
print(f"Ticks: {result.ticks}")
if len(log) > 0:
    times = np.array(log.t)
    alts = np.array(log.altitude) / 1000.0
    vels = np.array(log.velocity)
    q = np.array(log.dynamic_pressure)
    print(f"Time range: {times[0]:.1f}s - {times[-1]:.1f}s")
    print(f"Peak altitude: {np.max(alts):.1f} km")
    print(f"Peak velocity: {np.max(vels):.1f} m/s")
    i_maxq = int(np.argmax(q))
    print(f"Max-Q: {q[i_maxq]:.0f} Pa at t={times[i_maxq]:.1f}s, alt={alts[i_maxq]:.1f} km")
    print(f"O2 remaining: {result.life_support.oxygen_mass:.2f} kg")
    print()
    print("Stage Timeline:")
    prev_stage = None
    for i in range(len(log)):
        stage = log.current_stage_index[i]
        if stage != prev_stage:
            print(f"  t={times[i]:8.1f}s | Alt={alts[i]:8.1f} km | "
                  f"V={vels[i]:8.1f} m/s | Stage {stage + 1} burning")
            prev_stage = stage
