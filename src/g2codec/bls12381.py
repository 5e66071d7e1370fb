"""
.. module:: bls12381

bls12381 module
===============

This module exports the class :obj:`~g2codec.bls12381.point2` for representing
points in the G2 subgroup of the BLS12-381 curve, the namespace
:obj:`~g2codec.bls12381.codec` of encoding and decoding primitives, and the
wrapper class/namespace :obj:`~g2codec.bls12381.python` that encapsulates the
pure-Python arithmetic engine (built on `py_ecc <https://pypi.org/project/py-ecc>`__)
used for all group operations.

* The primitives in :obj:`~g2codec.bls12381.codec` convert between bytes-like
  objects and points. They check lengths, control flags, and field ranges, and
  they compute the sign flag of compressed encodings. They never perform curve
  arithmetic, with the single exception of :obj:`codec.dcm`, which asks an
  engine to recover the *y*-coordinate of a compressed point.

* The primitives in :obj:`~g2codec.bls12381.python` operate on *limbs*: tuples
  of eight integers ``(x.c0.a, x.c0.b, x.c1.a, x.c1.b, y.c0.a, y.c0.b, y.c1.a,
  y.c1.b)``, in which each coordinate component ``c`` is split into a 16-byte
  high limb ``a`` and a 32-byte low limb ``b`` (so that ``c == a * 2**256 + b``).
  Any namespace that exposes the same static methods can serve as an engine for
  a subclass of :obj:`point2` (by setting the ``_implementation`` attribute).

For most users, the class :obj:`~g2codec.bls12381.point2` should be sufficient.

>>> p = point2.base(2)
>>> q = point2.base(3)
>>> p + q == point2.base(5)
True
>>> point2.from_compressed(bytes(p + q)) == p + q
True
"""
from __future__ import annotations
from typing import Any, NoReturn, Sequence, Tuple, Union
import doctest
import hashlib
import base64
import logging
import secrets
from py_ecc.optimized_bls12_381 import (
    FQ2, G2, Z2, b2, curve_order, field_modulus,
    add as _add, multiply as _multiply, neg as _neg, normalize as _normalize,
    is_inf as _is_inf, is_on_curve as _is_on_curve
)
from py_ecc.bls.hash_to_curve import clear_cofactor_G2, hash_to_G2, map_to_curve_G2
from py_ecc.bls.point_compression import decompress_G2

logger = logging.getLogger(__name__)

# BLS12-381 modulus of *F_q*.
q = field_modulus

# Sizes (in bytes) of the supported binary representations.
FIELD_LEN = 48
COMPRESSED_LEN = 96
POINT_LEN = 192

# Control flags found in the three most significant bits of the first byte.
COMPRESSION_FLAG = 0x80
INFINITY_FLAG = 0x40
Y_FLAG = 0x20

# Domain separation tag of the proof-of-possession BLS signature scheme.
DEFAULT_DST = b'BLS_SIG_BLS12381G2_XMD:SHA-256_SSWU_RO_POP_'

# Scalars are unsigned integers no wider than the base field.
SCALAR_BITS = 381

Limbs = Tuple[int, int, int, int, int, int, int, int]
Fp2 = Union[FQ2, Tuple[int, int]]

class DecodingError(ValueError):
    """
    Base class of all errors raised when a binary representation (or a
    collection of limbs or coordinates) does not describe a valid point.
    """

class InvalidLength(DecodingError):
    """The input does not have the expected fixed size."""

class UnsupportedCompression(DecodingError):
    """The compression flag is in a state that this decoding path forbids."""

class UnsupportedInfinity(DecodingError):
    """The infinity flag is set where this decoding path forbids it."""

class UnsupportedYFlag(DecodingError):
    """The *y*-sign flag is set where this decoding path forbids it."""

class OutOfRange(DecodingError):
    """A field element is not less than the modulus."""

class UnexpectedInfinity(DecodingError):
    """The decoded coordinates describe the point at infinity."""

class ArithmeticFailure(RuntimeError):
    """
    The arithmetic engine rejected an operation or could not complete it. The
    error raised by the engine is available (unmodified) as :obj:`payload`.

    >>> e = ArithmeticFailure(ValueError('point is not on the curve'))
    >>> e.payload
    ValueError('point is not on the curve')
    """
    def __init__(self, payload: Any):
        super().__init__(payload)
        self.payload = payload

def _reject(error: DecodingError) -> DecodingError:
    logger.debug('rejecting input: %s', error)
    return error

def _invoke(operation, *args):
    """
    Invoke an engine primitive, converting any error it raises into an
    :obj:`ArithmeticFailure`.
    """
    try:
        return operation(*args)
    except Exception as e: # pylint: disable=broad-except
        logger.debug('engine operation %s failed: %r', getattr(operation, '__name__', operation), e)
        raise ArithmeticFailure(e) from e

def _split(n: int) -> Tuple[int, int]:
    return (n >> 256, n & ((1 << 256) - 1))

def _join(a: int, b: int) -> int:
    return (a << 256) | b

def _pair(f: Fp2) -> Tuple[int, int]:
    (c0, c1) = getattr(f, 'coeffs', f)
    return (int(c0), int(c1))

def _flags(b: int) -> Tuple[bool, bool, bool]:
    return (bool(b & COMPRESSION_FLAG), bool(b & INFINITY_FLAG), bool(b & Y_FLAG))

def _masked(bs: Union[bytes, bytearray]) -> bytes:
    # A copy; the supplied buffer is never modified.
    return bytes([bs[0] & ~(COMPRESSION_FLAG | INFINITY_FLAG | Y_FLAG) & 0xff]) + bytes(bs[1:])

def _coordinates(p: point2) -> Tuple[int, int, int, int]:
    """
    Return ``(x.c0, x.c1, y.c0, y.c1)`` for a point (stored as ``x.c1``,
    ``x.c0``, ``y.c1``, ``y.c0``).
    """
    (x1, x0, y1, y0) = (
        int.from_bytes(p[i:i + FIELD_LEN], 'big')
        for i in range(0, POINT_LEN, FIELD_LEN)
    )
    return (x0, x1, y0, y1)

def _raw(x0: int, x1: int, y0: int, y1: int) -> point2:
    return bytes.__new__(
        point2,
        b''.join(c.to_bytes(FIELD_LEN, 'big') for c in (x1, x0, y1, y0))
    )

class _ECp2(tuple): # pylint: disable=invalid-name
    """Internal class."""
    # pylint: disable=missing-function-docstring
    @classmethod
    def deserialize(cls, ls: Sequence[int]) -> _ECp2:
        (x0, x1, y0, y1) = (_join(ls[i], ls[i + 1]) for i in range(0, 8, 2))
        if x0 == x1 == y0 == y1 == 0:
            return cls(Z2)

        p = cls((FQ2((x0, x1)), FQ2((y0, y1)), FQ2.one()))
        if not _is_on_curve(p, b2):
            raise ValueError('point is not on the curve')
        return p

    def serialize(self) -> Limbs:
        if _is_inf(self):
            return (0,) * 8

        (x, y) = _normalize(self)
        return tuple(
            limb
            for c in (*x.coeffs, *y.coeffs)
            for limb in _split(int(c) % q)
        )

class python:
    """
    Wrapper class for the pure-Python arithmetic engine.

    This class encapsulates the group operations that the
    :obj:`point2` class delegates to an engine, all of which consume and
    produce limbs: :obj:`python.add <add>`, :obj:`python.mul <mul>`,
    :obj:`python.pnt <pnt>`, :obj:`python.neg <neg>`,
    :obj:`python.bas <bas>`, :obj:`python.rnd <rnd>`,
    :obj:`python.hsh <hsh>`, and :obj:`python.rec <rec>`.
    Operand points are checked for membership on the curve and errors are
    reported by raising :obj:`ValueError`.

    >>> p = python.bas(2)
    >>> python.add(python.bas(1), python.bas(1)) == p
    True

    The :obj:`point2` class is available as :obj:`python.point2 <point2>`.

    >>> python.point2 is point2
    True
    """
    @staticmethod
    def add(p: Limbs, q: Limbs) -> Limbs: # pylint: disable=redefined-outer-name
        """
        Return the sum of two points.

        >>> python.add(python.bas(1), python.neg(python.bas(1))) == (0,) * 8
        True
        """
        return _ECp2(_add(_ECp2.deserialize(p), _ECp2.deserialize(q))).serialize()

    @staticmethod
    def mul(s: int, p: Limbs) -> Limbs:
        """
        Multiply a point by a scalar. The point must be a member of the G2
        subgroup.

        >>> python.mul(3, python.bas(1)) == python.bas(3)
        True
        """
        e = _ECp2.deserialize(p)
        if not _is_inf(_multiply(e, curve_order)):
            raise ValueError('point is not in the G2 subgroup')
        return _ECp2(_multiply(e, s)).serialize()

    @staticmethod
    def pnt(f: Tuple[int, int]) -> Limbs:
        """
        Map an element of *F_q^2* (supplied as a pair ``(c0, c1)``) to a point
        in the G2 subgroup (the cofactor is cleared).

        >>> python.pnt((1, 2)) == python.pnt((1, 2))
        True
        """
        if not all(0 <= c < q for c in f):
            raise ValueError('field element is not less than the modulus')
        return _ECp2(clear_cofactor_G2(map_to_curve_G2(FQ2(f)))).serialize()

    @staticmethod
    def neg(p: Limbs) -> Limbs:
        """
        Return the negation of a point.

        >>> python.neg(python.neg(python.bas(7))) == python.bas(7)
        True
        """
        return _ECp2(_neg(_ECp2.deserialize(p))).serialize()

    @staticmethod
    def bas(s: int) -> Limbs:
        """
        Return the base point multiplied by the supplied scalar.

        >>> python.bas(0) == (0,) * 8
        True
        """
        return _ECp2(_multiply(G2, s)).serialize()

    @staticmethod
    def rnd() -> Limbs:
        """
        Return a random point in the G2 subgroup other than the identity.

        >>> len(python.rnd())
        8
        """
        return python.bas(secrets.randbelow(curve_order - 1) + 1)

    @staticmethod
    def hsh(bs: bytes, dst: bytes) -> Limbs:
        """
        Hash a bytes-like object to a point using the supplied domain
        separation tag.

        >>> python.hsh(b'abc', DEFAULT_DST) == python.hsh(b'abc', DEFAULT_DST)
        True
        """
        return _ECp2(hash_to_G2(bytes(bs), dst, hashlib.sha256)).serialize()

    @staticmethod
    def rec(x: Tuple[int, int, int, int], sign: bool) -> Limbs:
        """
        Recover the point that has the supplied *x*-coordinate (as limbs
        ``(x.c0.a, x.c0.b, x.c1.a, x.c1.b)``) and a *y*-coordinate with the
        supplied sign.

        >>> python.rec(python.bas(1)[:4], False) == python.bas(1)
        True
        """
        (x0, x1) = (_join(x[0], x[1]), _join(x[2], x[3]))
        z1 = x1 | (1 << 383) | (int(bool(sign)) << 381)
        return _ECp2(decompress_G2((z1, x0))).serialize()

class codec:
    """
    Namespace for the primitives that convert between binary representations
    and points: :obj:`codec.des <des>`, :obj:`codec.ser <ser>`,
    :obj:`codec.dcm <dcm>`, :obj:`codec.unc <unc>`, :obj:`codec.inf <inf>`,
    :obj:`codec.eql <eql>`, :obj:`codec.sgn <sgn>`, :obj:`codec.fpd <fpd>`,
    :obj:`codec.fse <fse>`, and :obj:`codec.fde <fde>`.

    Note that :obj:`codec.des` accepts only the 192-byte uncompressed form
    (with all control flags clear) while :obj:`codec.ser` always emits the
    96-byte compressed form. They are not inverses of one another; use
    :obj:`codec.dcm` to decode compressed representations and :obj:`codec.unc`
    to produce uncompressed ones.

    >>> p = point2.base(9)
    >>> codec.des(codec.unc(p)) == p
    True
    >>> codec.dcm(codec.ser(p)) == p
    True
    """
    @staticmethod
    def fpd(bs: Union[bytes, bytearray]) -> int:
        """
        Parse a 48-byte big-endian block as a 16-byte high limb followed by a
        32-byte low limb and return the field element it represents.

        >>> codec.fpd(bytes(47) + bytes([5]))
        5
        >>> codec.fpd(q.to_bytes(48, 'big')) # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
          ...
        OutOfRange: field element is not less than the modulus
        """
        if len(bs) != FIELD_LEN:
            raise _reject(InvalidLength(
                'field element must be ' + str(FIELD_LEN) + ' bytes; got ' + str(len(bs))
            ))

        n = _join(int.from_bytes(bs[:16], 'big'), int.from_bytes(bs[16:], 'big'))
        if n >= q:
            raise _reject(OutOfRange('field element is not less than the modulus'))

        return n

    @staticmethod
    def fse(f: Fp2) -> bytes:
        """
        Return the canonical 96-byte representation of an element of
        *F_q^2* (the imaginary component followed by the real component).

        >>> codec.fse((1, 2)).hex()[94:98]
        '0200'
        """
        (c0, c1) = _pair(f)
        if not (0 <= c0 < q and 0 <= c1 < q):
            raise _reject(OutOfRange('field element is not less than the modulus'))
        return c1.to_bytes(FIELD_LEN, 'big') + c0.to_bytes(FIELD_LEN, 'big')

    @staticmethod
    def fde(bs: Union[bytes, bytearray]) -> Tuple[int, int]:
        """
        Parse the canonical 96-byte representation of an element of *F_q^2*
        and return its components ``(c0, c1)``.

        >>> codec.fde(codec.fse((1, 2)))
        (1, 2)
        """
        if len(bs) != 2 * FIELD_LEN:
            raise _reject(InvalidLength(
                'field element must be ' + str(2 * FIELD_LEN) + ' bytes; got ' + str(len(bs))
            ))
        (c1, c0) = (codec.fpd(bs[:FIELD_LEN]), codec.fpd(bs[FIELD_LEN:]))
        return (c0, c1)

    @staticmethod
    def des(bs: Union[bytes, bytearray]) -> point2:
        """
        Decode a 192-byte uncompressed representation (with all three control
        flags clear) of a point other than the point at infinity.

        >>> p = point2.base(3)
        >>> codec.des(codec.unc(p)) == p
        True
        >>> codec.des(codec.unc(point2.base(0))) # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
          ...
        UnsupportedInfinity: infinity flag is set
        """
        if len(bs) != POINT_LEN:
            raise _reject(InvalidLength(
                'point must be ' + str(POINT_LEN) + ' bytes; got ' + str(len(bs))
            ))

        (compressed, infinity, sign) = _flags(bs[0])
        if compressed:
            raise _reject(UnsupportedCompression('compression flag is set'))
        if infinity:
            raise _reject(UnsupportedInfinity('infinity flag is set'))
        if sign:
            raise _reject(UnsupportedYFlag('y-sign flag is set'))

        bs = _masked(bs)
        (x1, x0, y1, y0) = (
            codec.fpd(bs[i:i + FIELD_LEN])
            for i in range(0, POINT_LEN, FIELD_LEN)
        )

        p = _raw(x0, x1, y0, y1)
        if codec.inf(p):
            raise _reject(UnexpectedInfinity('coordinates describe the point at infinity'))

        return p

    @staticmethod
    def ser(p: point2) -> bytes:
        """
        Return the 96-byte compressed representation of a point.

        >>> codec.ser(point2.base(0)).hex()[:4]
        'c000'
        >>> codec.ser(point2.base(1)).hex()[:32]
        '93e02b6052719f607dacd3a088274f65'
        """
        if codec.inf(p):
            return bytes([COMPRESSION_FLAG | INFINITY_FLAG]) + bytes(COMPRESSED_LEN - 1)

        (x0, x1, y0, y1) = _coordinates(p)
        flags = COMPRESSION_FLAG | (Y_FLAG if codec.sgn((y0, y1)) else 0)
        bs = codec.fse((x0, x1))
        return bytes([bs[0] | flags]) + bs[1:]

    @staticmethod
    def unc(p: point2) -> bytes:
        """
        Return the 192-byte uncompressed representation of a point. The point
        at infinity is represented by the infinity flag followed by zeros.

        >>> codec.unc(point2.base(0)).hex()[:4]
        '4000'
        """
        if codec.inf(p):
            return bytes([INFINITY_FLAG]) + bytes(POINT_LEN - 1)

        (x0, x1, y0, y1) = _coordinates(p)
        return codec.fse((x0, x1)) + codec.fse((y0, y1))

    @staticmethod
    def dcm(bs: Union[bytes, bytearray], implementation: Any = python) -> point2:
        """
        Decode a 96-byte compressed representation of a point. The
        *y*-coordinate is recovered by the supplied engine.

        >>> codec.dcm(bytes([0xc0]) + bytes(95)) == point2.base(0)
        True
        >>> p = point2.base(4)
        >>> codec.dcm(codec.ser(p)) == p
        True
        """
        if len(bs) != COMPRESSED_LEN:
            raise _reject(InvalidLength(
                'compressed point must be ' + str(COMPRESSED_LEN) +
                ' bytes; got ' + str(len(bs))
            ))

        (compressed, infinity, sign) = _flags(bs[0])
        if not compressed:
            raise _reject(UnsupportedCompression('compression flag is not set'))

        bs = _masked(bs)
        if infinity:
            if sign:
                raise _reject(UnsupportedYFlag('y-sign flag is set on the point at infinity'))
            if any(bs):
                raise _reject(UnsupportedInfinity('point at infinity has non-zero coordinates'))
            return _raw(0, 0, 0, 0)

        (x1, x0) = (codec.fpd(bs[:FIELD_LEN]), codec.fpd(bs[FIELD_LEN:]))
        return point2.from_limbs(_invoke(implementation.rec, _split(x0) + _split(x1), sign))

    @staticmethod
    def inf(p: point2) -> bool:
        """
        Return a boolean indicating whether the supplied point is the point
        at infinity (*i.e.*, both coordinates are zero).

        >>> codec.inf(point2.base(0))
        True
        >>> codec.inf(point2.base(1))
        False
        """
        return not any(_coordinates(p))

    @staticmethod
    def eql(p: point2, q: point2) -> bool: # pylint: disable=redefined-outer-name
        """
        Return a boolean indicating whether both coordinates of two points are
        equal.

        >>> codec.eql(point2.base(2), point2.base(1) + point2.base(1))
        True
        """
        return _coordinates(p) == _coordinates(q)

    @staticmethod
    def sgn(y: Fp2) -> bool:
        """
        Return the sign of a *y*-coordinate: whether its imaginary component
        (or, if that component is zero, its real component) lies strictly
        above ``(q - 1) / 2``.

        >>> codec.sgn((q - 1, 0))
        True
        >>> codec.sgn((q - 1, 1))
        False
        """
        (y0, y1) = _pair(y)
        return 2 * (y1 if y1 != 0 else y0) > q

class point2(bytes): # pylint: disable=invalid-name
    """
    Wrapper class for a bytes-like object that corresponds to a point in the
    G2 subgroup. Instances are immutable and store the coordinates in the
    uncompressed layout (without any control flags); the point at infinity
    has two zero coordinates.

    The stored content is therefore distinct from the binary representation
    returned by ``bytes(p)`` (along with :obj:`hex` and :obj:`to_base64`),
    which is always the 96-byte compressed form.

    >>> p = point2.base(5)
    >>> len(p), len(bytes(p))
    (192, 96)
    >>> p == bytes(p)
    False
    >>> point2.from_bytes(p.to_uncompressed()) == p
    True
    """
    _implementation = python

    @classmethod
    def random(cls) -> point2:
        """
        Return random instance.

        >>> point2.random().is_infinity()
        False
        """
        return cls.from_limbs(_invoke(cls._implementation.rnd))

    @classmethod
    def base(cls, s: int) -> point2:
        """
        Return the base point multiplied by the supplied scalar.

        >>> point2.base(1).hex()[:32]
        '93e02b6052719f607dacd3a088274f65'
        """
        return cls.from_limbs(_invoke(cls._implementation.bas, _scalar(s)))

    @classmethod
    def hash(cls, bs: Union[bytes, bytearray], dst: bytes = DEFAULT_DST) -> point2: # pylint: disable=W0221
        """
        Construct an instance by hashing the supplied bytes-like object to
        the curve.

        >>> point2.hash(b'123') == point2.hash(b'123')
        True
        >>> point2.hash(b'123') == point2.hash(b'123', b'OTHER_DST')
        False
        """
        return cls.from_limbs(_invoke(cls._implementation.hsh, bs, dst))

    @classmethod
    def mapfrom(cls, f: Fp2) -> point2:
        """
        Map an element of *F_q^2* (a :obj:`py_ecc` ``FQ2`` instance or a pair
        ``(c0, c1)`` of integers) to a point.

        >>> point2.mapfrom((1, 2)) == point2.mapfrom(FQ2((1, 2)))
        True
        """
        return cls.from_limbs(_invoke(cls._implementation.pnt, _pair(f)))

    @classmethod
    def from_limbs(cls, ls: Sequence[int]) -> point2:
        """
        Construct an instance from the eight limbs ``(x.c0.a, x.c0.b, x.c1.a,
        x.c1.b, y.c0.a, y.c0.b, y.c1.a, y.c1.b)`` returned by an engine.

        >>> p = point2.base(6)
        >>> point2.from_limbs(p.limbs()) == p
        True
        """
        ls = tuple(ls)
        if len(ls) != 8:
            raise _reject(InvalidLength('expected 8 limbs; got ' + str(len(ls))))

        for (a, b) in zip(ls[0::2], ls[1::2]):
            if not (0 <= a < (1 << 128) and 0 <= b < (1 << 256)) or _join(a, b) >= q:
                raise _reject(OutOfRange('limbs do not describe a field element'))

        p = _raw(*(_join(a, b) for (a, b) in zip(ls[0::2], ls[1::2])))
        p.__class__ = cls
        return p

    @classmethod
    def from_coordinates(cls, x: Fp2, y: Fp2) -> point2:
        """
        Construct an instance from its affine coordinates. Coordinates are
        checked to be in range but membership on the curve is not checked.

        >>> point2.from_coordinates(point2.base(1).x, point2.base(1).y) == point2.base(1)
        True
        """
        (x0, x1) = _pair(x)
        (y0, y1) = _pair(y)
        if not all(0 <= c < q for c in (x0, x1, y0, y1)):
            raise _reject(OutOfRange('coordinate is not less than the modulus'))

        p = _raw(x0, x1, y0, y1)
        p.__class__ = cls
        return p

    @classmethod
    def from_bytes(cls, bs: Union[bytes, bytearray]) -> point2:
        """
        Deserialize the supplied 192-byte uncompressed representation of an
        instance and return that instance.

        >>> p = point2.base(7)
        >>> point2.from_bytes(p.to_uncompressed()) == p
        True
        """
        p = codec.des(bs)
        p.__class__ = cls
        return p

    @classmethod
    def from_compressed(cls, bs: Union[bytes, bytearray]) -> point2:
        """
        Deserialize the supplied 96-byte compressed representation of an
        instance and return that instance.

        >>> p = point2.base(8)
        >>> point2.from_compressed(p.to_bytes()) == p
        True
        """
        p = codec.dcm(bs, cls._implementation)
        p.__class__ = cls
        return p

    @classmethod
    def _decode(cls, bs: Union[bytes, bytearray]) -> point2:
        if len(bs) == COMPRESSED_LEN:
            return cls.from_compressed(bs)
        if len(bs) == POINT_LEN:
            return cls.from_bytes(bs)
        raise _reject(InvalidLength(
            'point must be ' + str(COMPRESSED_LEN) + ' or ' + str(POINT_LEN) +
            ' bytes; got ' + str(len(bs))
        ))

    @classmethod
    def fromhex(cls, s: str) -> point2:
        """
        Construct an instance from its hexadecimal UTF-8 string representation
        (of either the compressed or the uncompressed binary representation).

        >>> p = point2.base(10)
        >>> point2.fromhex(p.hex()) == p
        True
        >>> point2.fromhex(p.to_uncompressed().hex()) == p
        True
        """
        return cls._decode(bytes.fromhex(s))

    @classmethod
    def from_base64(cls, s: str) -> point2:
        """
        Construct an instance from its Base64 UTF-8 string representation
        (of either the compressed or the uncompressed binary representation).

        >>> p = point2.base(11)
        >>> point2.from_base64(p.to_base64()) == p
        True
        """
        return cls._decode(base64.standard_b64decode(s))

    def __new__( # pylint: disable=arguments-differ
            cls,
            bs: Union[bytes, bytearray, None] = None
        ) -> point2:
        """
        If a bytes-like object is supplied, return the instance that it
        represents (in either the compressed or the uncompressed form). If an
        existing point is supplied, return a copy of it. If no argument is
        supplied, return a random instance.

        >>> p = point2.base(12)
        >>> point2(bytes(p)) == point2(p.to_uncompressed()) == p
        True
        >>> point2(point2.base(0)).is_infinity()
        True
        """
        if bs is None:
            return cls.random()
        if isinstance(bs, point2):
            return cls.from_limbs(bs.limbs())
        return cls._decode(bs)

    def __reduce__(self):
        # Rebuild from the stored coordinates without involving the engine.
        return (self.__class__.from_limbs, (self.limbs(),))

    @property
    def x(self: point2) -> FQ2:
        """
        Return the *x*-coordinate of this instance.

        >>> point2.base(0).x == FQ2.zero()
        True
        """
        (x0, x1, _, _) = _coordinates(self)
        return FQ2((x0, x1))

    @property
    def y(self: point2) -> FQ2:
        """
        Return the *y*-coordinate of this instance.

        >>> point2.base(1).y == -((-point2.base(1)).y)
        True
        """
        (_, _, y0, y1) = _coordinates(self)
        return FQ2((y0, y1))

    def limbs(self: point2) -> Limbs:
        """
        Return the eight limbs of the coordinates of this instance.

        >>> point2.base(0).limbs() == (0,) * 8
        True
        """
        return tuple(limb for c in _coordinates(self) for limb in _split(c))

    def is_infinity(self: point2) -> bool:
        """
        Return a boolean indicating whether this instance is the point at
        infinity.

        >>> (point2.base(3) - point2.base(3)).is_infinity()
        True
        """
        return codec.inf(self)

    def __mul__(self: point2, other: Any) -> NoReturn:
        """
        Use of this method is not permitted. A point cannot be a left-hand argument.

        >>> point2.base(1) * 2
        Traceback (most recent call last):
          ...
        TypeError: point must be on right-hand side of multiplication operator
        """
        raise TypeError('point must be on right-hand side of multiplication operator')

    def __rmul__(self: point2, other: int) -> point2:
        """
        Multiply this instance by a scalar (an integer of at most 381 bits).

        >>> 5 * point2.base(1) == point2.base(5)
        True
        >>> 'abc' * point2.base(1)
        Traceback (most recent call last):
          ...
        TypeError: point can only be multiplied by an integer scalar
        """
        p = point2.from_limbs(
            _invoke(self._implementation.mul, _scalar(other), self.limbs())
        )
        p.__class__ = self.__class__
        return p

    def __add__(self: point2, other: point2) -> point2:
        """
        Return the sum of this instance and another point.

        >>> point2.base(2) + point2.base(3) == point2.base(5)
        True
        """
        p = point2.from_limbs(_invoke(self._implementation.add, self.limbs(), other.limbs()))
        p.__class__ = self.__class__
        return p

    def __sub__(self: point2, other: point2) -> point2:
        """
        Return the result of subtracting another point from this instance.

        >>> point2.base(5) - point2.base(3) == point2.base(2)
        True
        """
        return self + (-other)

    def __neg__(self: point2) -> point2:
        """
        Return the negation (additive inverse) of this instance.

        >>> point2.base(4) + (-point2.base(4)) == point2.base(0)
        True
        """
        p = point2.from_limbs(_invoke(self._implementation.neg, self.limbs()))
        p.__class__ = self.__class__
        return p

    def __bytes__(self: point2) -> bytes:
        """
        Serialize this instance and return its 96-byte compressed binary
        representation.

        >>> len(bytes(point2.base(1)))
        96
        """
        return codec.ser(self)

    def to_bytes(self: point2) -> bytes:
        """
        Serialize this instance and return its 96-byte compressed binary
        representation.

        >>> p = point2.base(13)
        >>> point2.from_compressed(p.to_bytes()) == p
        True
        >>> type(p.to_bytes()) is bytes
        True
        """
        return bytes(self)

    def to_uncompressed(self: point2) -> bytes:
        """
        Serialize this instance and return its 192-byte uncompressed binary
        representation.

        >>> p = point2.base(14)
        >>> point2.from_bytes(p.to_uncompressed()) == p
        True
        """
        return codec.unc(self)

    def hex(self: point2) -> str: # pylint: disable=arguments-differ
        """
        Return a hexadecimal representation of the compressed binary
        representation of this instance.

        >>> point2.base(0).hex()[:4]
        'c000'
        """
        return bytes(self).hex()

    def to_base64(self: point2) -> str:
        """
        Return the Base64 UTF-8 string representation of the compressed binary
        representation of this instance.

        >>> point2.base(0).to_base64()[:4]
        'wAAA'
        """
        return base64.standard_b64encode(bytes(self)).decode('utf-8')

def _scalar(s: Any) -> int:
    if isinstance(s, bool) or not isinstance(s, int):
        raise TypeError('point can only be multiplied by an integer scalar')
    if s < 0 or s.bit_length() > SCALAR_BITS:
        raise ValueError(
            'scalar must be a non-negative integer of at most ' +
            str(SCALAR_BITS) + ' bits'
        )
    return s

# Encapsulate the point class for the engine, as well.
python.point2 = point2

if __name__ == '__main__':
    doctest.testmod() # pragma: no cover
