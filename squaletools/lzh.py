"""Decoder for LZH (-lh5-) compressed data."""

from __future__ import annotations

DICBIT = 13
DICSIZ = 1 << DICBIT
_DICMASK = DICSIZ - 1
UCHAR_MAX = 255
MAXMATCH = 256
THRESHOLD = 3
NC = UCHAR_MAX + MAXMATCH + 2 - THRESHOLD
CBIT = 9
CODE_BIT = 16
NP = DICBIT + 1
NT = CODE_BIT + 3
PBIT = 4
TBIT = 5
NPT = max(NT, NP)
BITBUFSIZ = 16
_WORD = 0xFFFF


class _Decoder:
    def __init__(self, packed: bytes) -> None:
        self.inbuf = packed
        self.inptr = 0

        self.left = [0] * (2 * NC - 1)
        self.right = [0] * (2 * NC - 1)
        self.c_len = [0] * NC
        self.pt_len = [0] * NPT
        self.pt_table = [0] * 256
        self.c_table = [0] * 4096

        self.bitbuf = 0
        self.subbitbuf = 0
        self.bitcount = 0
        self.blocksize = 0
        self.i_decode = 0
        self.remaining = 0
        self.done = False

        self.fillbuf(BITBUFSIZ)

    def _next_byte(self) -> int:
        if self.inptr < len(self.inbuf):
            value = self.inbuf[self.inptr]
            self.inptr += 1
            return value
        return 0

    def fillbuf(self, n: int) -> None:
        bitbuf = (self.bitbuf << n) & _WORD
        while n > self.bitcount:
            n -= self.bitcount
            bitbuf = (bitbuf | (self.subbitbuf << n)) & _WORD
            self.subbitbuf = self._next_byte()
            self.bitcount = 8
        self.bitcount -= n
        self.bitbuf = (bitbuf | (self.subbitbuf >> self.bitcount)) & _WORD

    def getbits(self, n: int) -> int:
        x = self.bitbuf >> (BITBUFSIZ - n)
        self.fillbuf(n)
        return x

    def make_table(self, nchar: int, bitlen: list[int], tablebits: int, table: list[int]) -> None:
        count = [0] * 17
        weight = [0] * 17
        start = [0] * 18

        for length in bitlen[:nchar]:
            count[length] += 1

        for i in range(1, 17):
            start[i + 1] = (start[i] + (count[i] << (16 - i))) & _WORD

        jutbits = 16 - tablebits
        for i in range(1, tablebits + 1):
            start[i] >>= jutbits
            weight[i] = 1 << (tablebits - i)
        for i in range(tablebits + 1, 17):
            weight[i] = 1 << (16 - i)

        i = start[tablebits + 1] >> jutbits
        if i != 0:
            table[i : 1 << tablebits] = [0] * ((1 << tablebits) - i)

        avail = nchar
        mask = 1 << (15 - tablebits)

        for ch, length in enumerate(bitlen[:nchar]):
            if length == 0:
                continue
            nextcode = start[length] + weight[length]
            if length <= tablebits:
                table[start[length] : nextcode] = [ch] * (nextcode - start[length])
            else:
                k = start[length]
                ref, idx = table, k >> jutbits
                for _ in range(length - tablebits):
                    if ref[idx] == 0:
                        self.right[avail] = self.left[avail] = 0
                        ref[idx] = avail
                        avail += 1
                    node = ref[idx]
                    ref = self.right if k & mask else self.left
                    idx = node
                    k <<= 1
                ref[idx] = ch
            start[length] = nextcode & _WORD

    def read_pt_len(self, nn: int, nbit: int, i_special: int) -> None:
        n = self.getbits(nbit)
        if n == 0:
            c = self.getbits(nbit)
            self.pt_len[:nn] = [0] * nn
            self.pt_table[:] = [c] * 256
            return

        i = 0
        while i < n:
            c = self.bitbuf >> (BITBUFSIZ - 3)
            if c == 7:
                mask = 1 << (BITBUFSIZ - 1 - 3)
                while mask & self.bitbuf:
                    mask >>= 1
                    c += 1
            self.fillbuf(3 if c < 7 else c - 3)
            self.pt_len[i] = c
            i += 1
            if i == i_special:
                for _ in range(self.getbits(2)):
                    self.pt_len[i] = 0
                    i += 1
        while i < nn:
            self.pt_len[i] = 0
            i += 1
        self.make_table(nn, self.pt_len, 8, self.pt_table)

    def read_c_len(self) -> None:
        n = self.getbits(CBIT)
        if n == 0:
            c = self.getbits(CBIT)
            self.c_len[:] = [0] * NC
            self.c_table[:] = [c] * 4096
            return

        i = 0
        while i < n:
            c = self.pt_table[self.bitbuf >> (BITBUFSIZ - 8)]
            if c >= NT:
                mask = 1 << (BITBUFSIZ - 1 - 8)
                while c >= NT:
                    c = self.right[c] if self.bitbuf & mask else self.left[c]
                    mask >>= 1
            self.fillbuf(self.pt_len[c])
            if c <= 2:
                if c == 0:
                    c = 1
                elif c == 1:
                    c = self.getbits(4) + 3
                else:
                    c = self.getbits(CBIT) + 20
                for _ in range(c):
                    self.c_len[i] = 0
                    i += 1
            else:
                self.c_len[i] = c - 2
                i += 1
        while i < NC:
            self.c_len[i] = 0
            i += 1
        self.make_table(NC, self.c_len, 12, self.c_table)

    def decode_c(self) -> int:
        if self.blocksize == 0:
            self.blocksize = self.getbits(16)
            if self.blocksize == 0:
                return NC
            self.read_pt_len(NT, TBIT, 3)
            self.read_c_len()
            self.read_pt_len(NP, PBIT, -1)

        self.blocksize -= 1
        j = self.c_table[self.bitbuf >> (BITBUFSIZ - 12)]
        if j >= NC:
            mask = 1 << (BITBUFSIZ - 1 - 12)
            while j >= NC:
                j = self.right[j] if self.bitbuf & mask else self.left[j]
                mask >>= 1
        self.fillbuf(self.c_len[j])
        return j

    def decode_p(self) -> int:
        j = self.pt_table[self.bitbuf >> (BITBUFSIZ - 8)]
        if j >= NP:
            mask = 1 << (BITBUFSIZ - 1 - 8)
            while j >= NP:
                j = self.right[j] if self.bitbuf & mask else self.left[j]
                mask >>= 1
        self.fillbuf(self.pt_len[j])
        if j != 0:
            j = (1 << (j - 1)) + self.getbits(j - 1)
        return j

    def _copy(self, buffer: bytearray, r: int, count: int) -> tuple[int, bool]:
        """Copy pending match bytes; return the new position and whether ``count`` was reached."""
        while True:
            self.remaining -= 1
            if self.remaining < 0:
                return r, False
            buffer[r] = buffer[self.i_decode]
            self.i_decode = (self.i_decode + 1) & _DICMASK
            r += 1
            if r == count:
                return r, True

    def decode(self, count: int, buffer: bytearray) -> int:
        r, full = self._copy(buffer, 0, count)
        if full:
            return r
        while True:
            c = self.decode_c()
            if c == NC:
                self.done = True
                return r
            if c <= UCHAR_MAX:
                buffer[r] = c
                r += 1
                if r == count:
                    return r
            else:
                self.remaining = c - (UCHAR_MAX + 1 - THRESHOLD)
                self.i_decode = (r - self.decode_p() - 1) & _DICMASK
                r, full = self._copy(buffer, r, count)
                if full:
                    return r


def unlzh(packed: bytes, outsize: int) -> bytes:
    """Decompress ``packed`` and return at most ``outsize`` bytes.

    Output is produced in windows of DICSIZ bytes; a window that would
    overflow ``outsize`` is dropped, as is everything after it.
    """
    try:
        decoder = _Decoder(bytes(packed))
        window = bytearray(DICSIZ)
        out = bytearray()
        while not decoder.done and len(out) < outsize:
            n = decoder.decode(len(window), window)
            if n > 0 and len(out) + n <= outsize:
                out += window[:n]
    except IndexError as exc:
        raise ValueError("corrupt LZH data") from exc
    return bytes(out)