#!/usr/bin/env python3
"""
tally_cycle.py
──────────────
Walks a tally/state indicator panel through every combination it knows,
one ASCII command at a time, over a plain serial link.

Frame:  Q <tally> <state> W      (4 bytes, no terminator, no CRC)
  • tally  1-9, A-F   (15, outer loop)
  • state  0-4        (5,  inner loop)
  • 75 frames per cycle, 500 ms apart, repeated forever
  • 5 s settle after open so the panel can finish its reset

Nothing is read back. Any open or write error aborts the run.

Examples
────────
python tally_cycle.py
python tally_cycle.py --port /dev/ttyACM0
python tally_cycle.py --port COM7 --baud 57600

Requires:  pip install pyserial
"""

import argparse, itertools, sys, textwrap, time
import serial

PORT_DEFAULT = "/dev/cu.usbmodemfa131"    # adjust if necessary
BAUD         = 115_200                    # 8-N-1, pyserial defaults

TALLIES  = "123456789ABCDEF"
STATES   = "01234"

SETTLE_S = 5.0                            # panel boot/reset after open
GAP_S    = 0.5                            # after every write


class TallyError(Exception):
    pass

class ConnectionOpenError(TallyError):
    """serial device could not be opened"""

class WriteError(TallyError):
    """write to an already-open port failed"""


# ────── frames ────────────────────────────────────────────
def build_msg(tally: str, state: str) -> bytes:
    if len(tally) != 1 or tally not in TALLIES:
        raise ValueError(f"bad tally {tally!r}")
    if len(state) != 1 or state not in STATES:
        raise ValueError(f"bad state {state!r}")
    return f"Q{tally}{state}W".encode("ascii")

def cycle():
    """one full pass: tally outer, state inner (75 pairs)"""
    return itertools.product(TALLIES, STATES)


# ────── port ──────────────────────────────────────────────
def open_port(port: str, baud: int = BAUD) -> serial.Serial:
    try:
        return serial.Serial(port, baud)
    except serial.SerialException as e:
        raise ConnectionOpenError(f"open {port}: {e}") from e

def stream(ser, cycles=None) -> int:
    """
    Send every frame of every cycle.  cycles=None loops forever; the
    return value (frames written) only matters when a count is given.
    """
    passes = itertools.count() if cycles is None else range(cycles)
    sent = 0
    for _ in passes:
        for t, s in cycle():
            msg = build_msg(t, s)
            print(f"T: {t} S: {s} Sending: {msg.decode('ascii')}")
            try:
                n = ser.write(msg)
            except serial.SerialException as e:
                raise WriteError(f"{msg.decode('ascii')}: {e}") from e
            print(f"  wrote {n} bytes")
            sent += 1
            time.sleep(GAP_S)
    return sent


# ────── CLI / main ────────────────────────────────────────
def parse(argv=None):
    p = argparse.ArgumentParser(
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="Cycle a tally panel through all tally/state commands",
        epilog=textwrap.dedent("""\
            Examples:
              python tally_cycle.py
              python tally_cycle.py --port /dev/ttyACM0
        """))
    p.add_argument("--port", default=PORT_DEFAULT,
                   help=f"serial device (default {PORT_DEFAULT})")
    p.add_argument("--baud", type=int, default=BAUD,
                   help=f"bit rate (default {BAUD})")
    return p.parse_args(argv)

def main(argv=None):
    opt = parse(argv)

    try:
        ser = open_port(opt.port, opt.baud)
    except ConnectionOpenError as e:
        sys.exit(f"[!] {e}")

    print(f"[+] TX on {ser.port} {opt.baud}-8N1; "
          f"settling {SETTLE_S:g}s, frame every {GAP_S:g}s")
    time.sleep(SETTLE_S)

    try:
        stream(ser)
    except WriteError as e:
        sys.exit(f"[!] write failed: {e}")

if __name__ == "__main__":
    main()
