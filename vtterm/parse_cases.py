"""Actions the escape-sequence parser takes for an input byte."""

from __future__ import annotations

from enum import IntEnum


class ParseCase(IntEnum):
    """What the parser does with a byte in its current state."""

    GROUND_STATE = 0
    IGNORE_STATE = 1
    IGNORE_ESC = 2
    IGNORE = 3
    BELL = 4
    BS = 5
    CR = 6
    ESC = 7
    VMOT = 8
    TAB = 9
    LF = 10
    LS0 = 11
    LS1 = 12
    SP = 13
    SCR_STATE = 14
    ESC_IGNORE = 19
    ESC_DIGIT = 20
    ESC_SEMI = 21
    DEC_STATE = 22
    ICH = 23
    CUU = 24
    CUD = 25
    CUF = 26
    CUB = 27
    CUP = 28
    ED = 29
    EL = 30
    IL = 31
    DL = 32
    DCH = 33
    DA1 = 34
    TRACK_MOUSE = 35
    TBC = 36
    SET = 37
    RST = 38
    SGR = 39
    CPR = 40
    DECSTBM = 41
    DECREQTPARM = 42
    DECSET = 43
    DECRST = 44
    DECALN = 45
    DECSC = 47
    DECRC = 48
    DECKPAM = 49
    DECKPNM = 50
    IND = 51
    NEL = 52
    HTS = 53
    RI = 54
    SS2 = 55
    SS3 = 56
    CSI_STATE = 57
    OSC = 58
    RIS = 59
    LS2 = 60
    LS3 = 61
    LS3R = 62
    LS2R = 63
    LS1R = 64
    PRINT = 65
    XTERM_SAVE = 66
    XTERM_RESTORE = 67
    XTERM_TITLE = 68
    DECID = 69
    HP_MEM_LOCK = 70
    HP_MEM_UNLOCK = 71
    HP_BUGGY_LL = 72
    SCS_STATE = 79
    UTF8_2BYTE = 80
    UTF8_3BYTE = 81
    UTF8_INSTRING = 82
    SJIS_INSTRING = 83
    SJIS_KANA = 84
    PRINT_GR = 85
    VPA = 87
    HPA = 88
    SU = 89
    SD = 90
    ECH = 91
    DECSCUSR_ETC = 93
    CSI_SP = 94
    CBT = 95
    CNL = 96
    CPL = 97
    CFT = 98
    INDEX = 99
    NEXT_LINE = 100
    REP = 101