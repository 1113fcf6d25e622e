"""Tests for miscellaneous instructions (Fxxx)."""

import pytest
from chipper import execute, MemoryFault, FONT_DATA


class TestTimers:
    """Test timer-related instructions."""

    def test_misc_timer_instructions(self, fresh_state):
        """Test timer set and get operations."""
        state = execute(fresh_state, 0x6030)  # V0 = 48
        state = execute(state, 0xF015)  # Set delay timer to V0
        assert state.delay_timer == 48

        state = execute(state, 0x6120)  # V1 = 32
        state = execute(state, 0xF118)  # Set sound timer to V1
        assert state.sound_timer == 32

        state = execute(state, 0xF207)  # V2 = delay timer
        assert state.V[2] == 48
        assert state.pc == 0x20A


class TestBCD:
    """Test BCD conversion."""

    @pytest.mark.parametrize("value,digits", [
        (234, [2, 3, 4]),
        (156, [1, 5, 6]),
        (0, [0, 0, 0]),
        (7, [0, 0, 7]),
        (40, [0, 4, 0]),
        (255, [2, 5, 5]),
    ])
    def test_bcd_conversion(self, fresh_state, value, digits):
        """FX33 - hundreds, tens and ones of VX at I, I+1, I+2."""
        state = execute(fresh_state, 0x6500 | value)  # V5 = value
        state = execute(state, 0xA300)  # I = 0x300
        state = execute(state, 0xF533)

        assert [int(state.memory[0x300 + i]) for i in range(3)] == digits
        assert state.I == 0x300

    def test_bcd_past_end_of_memory(self, fresh_state):
        """FX33 - Digits that do not fit fault."""
        state = execute(fresh_state, 0xAFFE)
        with pytest.raises(MemoryFault) as excinfo:
            execute(state, 0xF033)
        assert excinfo.value.address == 0x1000


class TestFont:
    """Test font character addressing."""

    @pytest.mark.parametrize("digit", range(16))
    def test_font_all_characters(self, fresh_state, digit):
        """FX29 - I = VX * 5, pointing at the glyph bytes."""
        state = execute(fresh_state, 0x6000 | digit)
        state = execute(state, 0xF029)

        assert state.I == digit * 5
        glyph = [int(state.memory[int(state.I) + i]) for i in range(5)]
        assert glyph == FONT_DATA[digit * 5:digit * 5 + 5]


class TestMemoryOperations:
    """Test store/load register operations."""

    def test_store_registers(self, fresh_state):
        """FX55 - Store V0..VX at I, then I = X + 1."""
        state = execute(fresh_state, 0x6001)
        state = execute(state, 0x6102)
        state = execute(state, 0x6203)
        state = execute(state, 0x6304)  # Not stored
        state = execute(state, 0xA300)

        state = execute(state, 0xF255)

        assert [int(state.memory[0x300 + i]) for i in range(4)] == [1, 2, 3, 0]
        assert state.I == 3

    def test_load_registers(self, fresh_state):
        """FX65 - Load V0..VX from I, then I = X + 1."""
        state = fresh_state.replace(memory=fresh_state.memory.at[0x400:0x402].set(9))
        state = execute(state, 0x6277)
        state = execute(state, 0xA400)

        state = execute(state, 0xF165)

        assert state.V[0] == 9
        assert state.V[1] == 9
        assert state.V[2] == 0x77
        assert state.I == 2

    def test_store_load_roundtrip(self, fresh_state):
        """Registers survive a store, clear and load through I."""
        state = execute(fresh_state, 0x60AA)
        state = execute(state, 0x61BB)
        state = execute(state, 0xA400)
        state = execute(state, 0xF155)

        state = execute(state, 0x6000)
        state = execute(state, 0x6100)
        state = execute(state, 0xA400)
        state = execute(state, 0xF165)

        assert state.V[0] == 0xAA
        assert state.V[1] == 0xBB

    def test_store_registers_fault(self, fresh_state):
        """FX55 - Writing past the end of RAM faults."""
        state = execute(fresh_state, 0xAFFA)
        with pytest.raises(MemoryFault) as excinfo:
            execute(state, 0xFF55)
        assert excinfo.value.address == 0x1009


class TestWaitForKey:
    """Test FX0A polling."""

    def test_wait_for_key_no_key(self, fresh_state):
        """FX0A - Nothing changes while no key is pressed."""
        state = execute(fresh_state, 0xF30A)
        assert state.pc == 0x200
        assert state.V[3] == 0

    def test_wait_for_key_pressed(self, fresh_state):
        """FX0A - Store the pressed key and continue."""
        state = fresh_state.replace(keypad=fresh_state.keypad.at[7].set(True))

        state = execute(state, 0xF00A)

        assert state.V[0] == 7
        assert state.pc == 0x202

    def test_wait_for_key_highest_wins(self, fresh_state):
        """FX0A - With several keys down the highest index is stored."""
        keypad = fresh_state.keypad.at[2].set(True).at[9].set(True).at[4].set(True)
        state = fresh_state.replace(keypad=keypad)

        state = execute(state, 0xF00A)

        assert state.V[0] == 9


class TestAddToIndex:
    """Test FX1E."""

    def test_add_to_index(self, fresh_state):
        """FX1E - Add VX to I register."""
        state = execute(fresh_state, 0x6010)  # V0 = 0x10
        state = execute(state, 0xA300)  # I = 0x300
        state = execute(state, 0xF01E)  # I += V0

        assert state.I == 0x310
        assert state.V[15] == 0

    def test_add_to_index_overflow(self, fresh_state):
        """FX1E - Past 0xFFF sets VF, I keeps the full sum."""
        state = execute(fresh_state, 0x60FF)  # V0 = 0xFF
        state = execute(state, 0xAF80)  # I = 0xF80
        state = execute(state, 0xF01E)  # I += V0

        assert state.I == 0x107F
        assert state.V[15] == 1
