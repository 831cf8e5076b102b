import pytest

from squaletools.cartridge import CartridgeError, build_cartridge, main


def test_layout_of_small_image():
    loader = b"\x01\x02\x03"
    program = b"\xaa" * 10
    rom = build_cartridge(loader, program)
    assert len(rom) == 32 * 1024
    assert rom[:3] == loader
    assert set(rom[3:0x100]) == {0xFF}
    assert rom[0x100:0x10A] == program
    assert set(rom[0x10A:]) == {0xFF}


def test_program_at_limit_stays_small():
    program = b"\x55" * (32 * 1024 - 0x100)
    rom = build_cartridge(b"\x00", program)
    assert len(rom) == 32 * 1024
    assert rom[-1] == 0x55


def test_program_over_limit_gives_large_image():
    program = b"\x55" * (32 * 1024 - 0x100 + 1)
    rom = build_cartridge(b"\x00", program)
    assert len(rom) == 64 * 1024
    assert rom[0x100 + len(program) - 1] == 0x55
    assert rom[0x100 + len(program)] == 0xFF


def test_program_overwrites_long_loader():
    loader = b"\x11" * 0x200
    rom = build_cartridge(loader, b"\x22")
    assert rom[0xFF] == 0x11
    assert rom[0x100] == 0x22
    assert rom[0x101] == 0x11


def test_program_too_large():
    with pytest.raises(CartridgeError):
        build_cartridge(b"\x00", b"\x00" * (64 * 1024))


@pytest.mark.parametrize("loader,program", [(b"", b"\x01"), (b"\x01", b"")])
def test_empty_inputs_rejected(loader, program):
    with pytest.raises(CartridgeError):
        build_cartridge(loader, program)


def test_main_writes_rom(tmp_path):
    loader = tmp_path / "loader.bin"
    program = tmp_path / "prog.bin"
    output = tmp_path / "out.rom"
    loader.write_bytes(b"\x7e\x01")
    program.write_bytes(b"\x12\x34")
    assert main([str(loader), str(program), str(output)]) == 0
    assert output.read_bytes() == build_cartridge(b"\x7e\x01", b"\x12\x34")


def test_main_missing_file(tmp_path, capsys):
    program = tmp_path / "prog.bin"
    program.write_bytes(b"\x12")
    output = tmp_path / "out.rom"
    code = main([str(tmp_path / "missing.bin"), str(program), str(output)])
    assert code != 0
    assert "Can't open" in capsys.readouterr().out
    assert not output.exists()


def test_main_wrong_argument_count(tmp_path):
    assert main([str(tmp_path / "a")]) == 0
    assert list(tmp_path.iterdir()) == []