# tcpseqno

Helpers for TCP sequence numbers. These are 32-bit values that wrap around
and start from an arbitrary initial sequence number (ISN).

The package converts between two views of a stream position:

- an **absolute** sequence number, a 64-bit count that starts at zero;
- a **relative** sequence number, the 32-bit `WrappingInt32` that appears
  in TCP headers. It is offset by the ISN and taken modulo 2³².

Everything lives in the module `tcpseqno.wrapping`.

## Installation

```
pip install tcpseqno
```

The package has no runtime dependencies.

## Usage

```python
from tcpseqno.wrapping import WrappingInt32, wrap, unwrap

isn = WrappingInt32(2**32 - 2)

# Absolute -> relative
seqno = wrap(3, isn)
print(seqno)                   # 1

# Relative -> absolute, choosing the candidate nearest to a checkpoint
print(unwrap(seqno, isn, 0))   # 3
```

Many absolute numbers wrap to the same 32-bit value, so `unwrap` takes a
checkpoint and returns the candidate closest to it. A typical checkpoint
is the last byte index the receiver reassembled.

### `WrappingInt32`

A `WrappingInt32` is a frozen dataclass with a single field, `raw_value`.
That field must be an `int` in the range `0 <= raw_value < 2**32`:

- a value outside that range raises `ValueError`;
- a value that is not an `int`, including a `bool`, raises `TypeError`.

Values are hashable. Two values compare equal when their raw values match.

The following operations are supported:

- `a + n` steps `n` places past `a`, wrapping modulo 2³².
- `a - n`, with an integer `n`, steps `n` places before `a`.
- `a - b`, with two `WrappingInt32` values, gives the signed 32-bit
  distance from `b` to `a`. The result is in `[-2**31, 2**31)`. It is
  negative when going backwards is no longer than going forwards.
- `str(a)` gives the raw value in decimal.

### Errors

- `wrap(n, isn)` raises `ValueError` when `n` is outside the unsigned
  64-bit range.
- `unwrap(n, isn, checkpoint)` raises `ValueError` when `checkpoint` is
  outside the unsigned 64-bit range.

## What this package does not do

This package only does sequence-number arithmetic. It does not contain:

- a TCP sender or receiver;
- stream reassembly;
- segment parsing or serialization;
- any networking I/O.

## Running the tests

```
pip install "tcpseqno[test]"
pytest
```