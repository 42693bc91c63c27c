"""
tickwise — Hello World

A consumer takes a Clock in its constructor. Production code gets the
system clock by default; tests pin the clock to a literal instant.
"""

from tickwise import Clock, FixedClock, SystemClock, resolve_clock

# ─── Your consumer (knows nothing about which clock it gets) ───


class Greeter:
    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock or SystemClock()

    def greeting(self, name: str) -> str:
        hour = self._clock.now().hour
        if hour < 12:
            return f"Good morning, {name}!"
        if hour < 18:
            return f"Good afternoon, {name}!"
        return f"Good evening, {name}!"


def main():
    # ──────────────────────────────────────
    #  1. Production wiring: TICKWISE_CLOCK picks the clock (system by default)
    # ──────────────────────────────────────
    print("wired:", Greeter(resolve_clock()).greeting("Ada"))

    # ──────────────────────────────────────
    #  2. Test wiring: pinned instants
    # ──────────────────────────────────────
    for literal in ("2023-01-01T09:00:00Z", "2023-01-01T15:00:00Z", "2023-01-01T19:00:00Z"):
        greeter = Greeter(FixedClock.at(literal))
        print(f"{literal}:", greeter.greeting("Ada"))


if __name__ == "__main__":
    main()
