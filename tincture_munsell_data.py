# -*- coding: utf-8 -*-
# Tincture: Munsell notation and colour-order conversions
#
# Copyright (c) 2026 opticsWolf
#
# SPDX-License-Identifier: LGPL-3.0-or-later

"""
Munsell Renotation Samples (All)
================================
Chromaticities of the Munsell renotation data set (*all.dat*, including the
extrapolated colours), CIE 1931 xy under Illuminant C.

Encoding:
    ``TBL_SRC_MIN[vi]`` holds one row per populated hue step of the Value
    level ``TBL_V[vi]``.  A row is ``(hue_step, dx1, dy1, dx2, dy2, ...)``
    where ``hue_step = 10 * hue / 25`` (10RP is step 0) and the pairs are the
    x/y chromaticities in thousandths for chroma 2, 4, 6, ..., encoded as
    second-order differences.  Two cumulative sums restore the absolute
    values.

Reference:
    Munsell Color Science Laboratory, RIT. "Munsell Renotation Data".
"""

from typing import Final, Tuple

TBL_V: Final[Tuple[float, ...]] = (
    0.2, 0.4, 0.6, 0.8, 1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0, 10.0,
)

TBL_SRC_MIN: Final[Tuple[Tuple[Tuple[int, ...], ...], ...]] = (
    (  # V = 0.2
        (0, 404, 164, -384, -203, -9, 17),
        (1, 451, 183, -414, -224, -15, 18),
        (2, 501, 204, -446, -249),
        (3, 543, 224, -460, -270),
        (4, 592, 246, -488, -294),
        (5, 679, 290, -515, -335),
        (6, 837, 375, -500, -395),
        (7, 1000, 480),
        (8, 1290, 740),
        (9, 1430, 970),
        (10, 1495, 1284),
        (11, 1434, 1459),
        (13, 713, 1414),
        (14, 449, 1145),
        (15, 262, 837, -602, 486),
        (16, 185, 676, -627, -119),
        (17, 144, 584, -523, -277),
        (18, 117, 516, -443, -313),
        (19, 97, 458, -375, -341),
        (20, 80, 397, -297, -369),
        (21, 68, 332, -236, -339),
        (22, 66, 261, -180, -299),
        (23, 72, 226, -160, -271),
        (24, 85, 195, -155, -242),
        (25, 97, 177, -155, -226),
        (26, 111, 164, -159, -214),
        (27, 121, 157, -168, -205),
        (28, 133, 149, -178, -196, 20, 19),
        (29, 147, 143, -185, -192, 16, 22),
        (30, 165, 136, -197, -182, 14, 18, 7, 11, 3, 4, -2, -1),
        (31, 192, 130, -213, -173, 9, 17, 5, 10, 3, 5, 1, 2, 0, 2, 0, 1,
         1, 0, 1, 0),
        (32, 227, 126, -241, -164, 7, 14, 3, 9, 2, 6, 0, 0, 0, 2, 1, 1,
         -1, 0, 1, 0),
        (33, 250, 127, -259, -164, 4, 14, 1, 8, 3, 6, -1, 1, 1, 1, 0, 1,
         0, 0),
        (34, 275, 129, -281, -165, 3, 15, 1, 5, 1, 7, 1, 1, -1, 1),
        (35, 288, 131, -293, -168, 2, 17, 0, 4, 2, 7, 0, 0),
        (36, 300, 134, -304, -171, 1, 15, 1, 7, 1, 6),
        (37, 315, 137, -317, -174, 1, 15, -1, 8, 2, 3),
        (38, 337, 143, -333, -180, -3, 15, -1, 7),
        (39, 370, 152, -359, -189, -4, 15, -2, 6),
    ),
    (  # V = 0.4
        (0, 381, 220, -356, -259, -8, 11, -3, 3, 3, -5),
        (1, 411, 236, -372, -274, -12, 10, -3, 1, 4, -3),
        (2, 441, 255, -384, -291, -18, 7, -1, 0),
        (3, 466, 272, -393, -306, -24, 4, -2, -2),
        (4, 490, 289, -398, -320, -25, 2, -10, -4),
        (5, 534, 324, -403, -350, -41, -2, -1, -1),
        (6, 585, 367, -395, -372, -76, -13),
        (7, 638, 420, -368, -388),
        (8, 698, 499),
        (9, 729, 588),
        (10, 721, 656),
        (11, 659, 700),
        (12, 542, 670),
        (13, 423, 590, -111, 640),
        (14, 358, 528, -393, 411),
        (15, 312, 482, -496, 177),
        (16, 277, 445, -513, 16),
        (17, 258, 423, -511, -103),
        (18, 239, 399, -489, -194),
        (19, 226, 380, -463, -259),
        (20, 213, 361, -430, -317),
        (21, 196, 332, -384, -330),
        (22, 180, 298, -329, -337),
        (23, 173, 275, -295, -330, 66, 28),
        (24, 169, 249, -264, -311, 53, 24),
        (25, 169, 236, -251, -300, 43, 26),
        (26, 172, 223, -242, -287, 35, 24),
        (27, 176, 213, -239, -275, 31, 22),
        (28, 183, 203, -240, -261, 24, 18, 7, 2),
        (29, 190, 196, -239, -253, 21, 16, 8, 8),
        (30, 202, 188, -243, -242, 15, 15, 7, 10, 10, 16, 1, 2, 5, 5, 1, 0,
         -1, 1, -2, -2),
        (31, 220, 180, -248, -230, 11, 15, 7, 12, 5, 9, 0, 2, 2, 6, 1, -2,
         -1, 2, 1, 0, 0, 2, 0, -2, 0, 1, 0, 1),
        (32, 241, 176, -259, -221, 7, 14, 5, 9, 2, 6, 1, 4, 1, 5, 0, 0,
         0, 0, 1, 2, 0, -1, 0, 1, -1, 0, 1, 1),
        (33, 259, 177, -272, -220, 5, 13, 3, 8, 2, 4, 0, 8, 2, 1, -1, 2,
         1, 0, 0, 2, -1, -1, 1, 2, 0, -2),
        (34, 281, 182, -290, -226, 2, 16, 2, 5, 2, 5, -1, 6, 3, 3, -1, 1,
         0, 2, 1, 0),
        (35, 296, 185, -303, -228, 2, 15, 1, 5, 0, 4, 1, 6, 2, 3, -1, 3,
         1, -1),
        (36, 309, 189, -314, -232, 3, 16, -2, 3, 2, 2, 0, 10, 1, 3, -1, 0),
        (37, 320, 193, -320, -235, 0, 14, 0, 5, 0, 1, 0, 9, 0, 2),
        (38, 337, 199, -330, -240, -3, 14, -2, 2, 1, 1, -3, 12),
        (39, 360, 209, -346, -249, -4, 12, -3, 4, 0, -3),
    ),
    (  # V = 0.6
        (0, 372, 247, -345, -283, -7, 7, -5, 5, -2, 1, -1, 2),
        (1, 391, 260, -350, -293, -9, 6, -7, 3, -3, 2, 4, -6),
        (2, 411, 274, -353, -302, -13, 3, -8, 1, -2, 3),
        (3, 431, 290, -360, -316, -15, 2, -10, -2, -10, 4),
        (4, 447, 305, -357, -326, -22, -2, -13, -3, -11, 5),
        (5, 474, 332, -345, -342, -39, -9, 4, -2, -35, 5),
        (6, 505, 367, -337, -363, -36, -13, -7, -6),
        (7, 526, 397, -288, -353),
        (8, 551, 444, -203, -301),
        (9, 563, 491, -131, -248),
        (10, 548, 526),
        (11, 502, 531, 40, 12),
        (12, 432, 501, 38, 221),
        (13, 377, 468, -151, 233),
        (14, 342, 442, -274, 111),
        (15, 315, 420, -356, -48, -278, 295),
        (16, 292, 399, -376, -146, -252, 220),
        (17, 281, 388, -387, -215, -212, 155),
        (18, 270, 376, -388, -259, -162, 72),
        (19, 259, 363, -381, -286, -117, 24),
        (20, 247, 349, -370, -309, -69, -4),
        (21, 236, 334, -355, -327, -34, -14),
        (22, 221, 311, -330, -338, 6, -14),
        (23, 213, 295, -313, -336, 17, -2),
        (24, 206, 276, -296, -331, 26, 10),
        (25, 202, 260, -281, -318, 27, 13, -2, -1),
        (26, 202, 245, -270, -303, 22, 16, 2, -3),
        (27, 204, 235, -265, -292, 17, 15, 5, 2),
        (28, 209, 227, -265, -282, 18, 11, 7, 7),
        (29, 215, 221, -264, -277, 14, 13, 10, 11, 8, 10, 7, 9),
        (30, 223, 215, -264, -270, 11, 13, 9, 12, 8, 11, 5, 7, 2, 3, 1, 1,
         -1, 0, 1, 0, 1, 2),
        (31, 239, 208, -270, -261, 11, 15, 8, 13, 4, 7, 3, 6, 1, 3, 1, 1,
         0, 0, 0, 1, 1, 2, 0, 0, 0, -1, 0, 0, 0, 2),
        (32, 257, 204, -277, -251, 8, 14, 3, 7, 4, 10, 2, 4, -1, 0, 2, 4,
         0, 0, 0, 1, 0, 1, 1, 1, 0, -1, -1, 0, 0, 0),
        (33, 272, 205, -286, -250, 6, 14, 2, 6, 2, 9, 2, 3, -1, -2, 1, 8,
         1, -2, -1, 3, 1, 0, 0, 1, 0, -1, 0, -1),
        (34, 287, 207, -294, -248, 1, 11, 2, 4, 2, 10, 0, 2, 0, -1, 1, 6,
         0, -1, 0, 5, 0, -2, 1, 3),
        (35, 301, 211, -306, -252, 1, 12, 0, 3, 0, 9, 1, 2, 1, -1, 0, 5,
         1, 4, 0, 0),
        (36, 311, 214, -314, -254, 1, 11, 0, 3, 0, 8, 1, 4, -1, -4, 1, 9,
         0, 0),
        (37, 322, 218, -320, -257, -1, 11, 0, 2, -1, 7, 0, 5, 0, -5, -1, 8),
        (38, 337, 226, -327, -263, -3, 7, -2, 6, -1, 3, -1, 6, 1, -4, -1, 7),
        (39, 355, 236, -337, -272, -4, 6, -4, 6, -1, 2, -2, 4, 1, -1),
    ),
    (  # V = 0.8
        (0, 365, 261, -337, -292, -6, 4, -2, 1, -8, 9, 0, 0, -1, 1),
        (1, 381, 272, -341, -299, -6, 1, -6, 2, -9, 6, 0, 0, -4, 2),
        (2, 399, 286, -348, -311, -5, 1, -6, 1, -11, 6, -3, 0),
        (3, 411, 297, -345, -318, -9, 0, -7, 0, -10, 3, -4, 1),
        (4, 423, 309, -338, -322, -15, -3, -13, -5, -7, 2, -10, -3),
        (5, 445, 333, -332, -336, -34, -7, -1, -4, 9, -4, -14, 3),
        (6, 463, 361, -314, -346, -40, -15, -4, -4),
        (7, 475, 386, -287, -342, -34, -24),
        (8, 481, 411, -213, -288),
        (9, 479, 439, -138, -238),
        (10, 465, 457, -39, -124),
        (11, 434, 460, 12, 16),
        (12, 397, 448, -33, 102),
        (13, 363, 425, -170, 57),
        (14, 336, 410, -272, -82, -39, 200),
        (15, 314, 394, -323, -175, -59, 137, -288, 307),
        (16, 298, 381, -342, -225, -60, 98, -202, 175),
        (17, 287, 371, -349, -254, -61, 55, -192, 135),
        (18, 280, 363, -355, -279, -48, 22, -144, 78),
        (19, 272, 355, -353, -296, -37, 3, -98, 23),
        (20, 265, 346, -352, -310, -21, -10, -62, -6),
        (21, 253, 332, -343, -322, -3, -11, -39, -10),
        (22, 241, 315, -332, -331, 13, -8, -12, -12),
        (23, 230, 296, -315, -328, 17, 1, -1, -4),
        (24, 223, 280, -300, -323, 17, 5, 7, 3),
        (25, 220, 271, -291, -320, 16, 8, 9, 7),
        (26, 218, 258, -282, -309, 16, 7, 11, 8),
        (27, 220, 249, -280, -302, 15, 10, 12, 10, 0, 2),
        (28, 222, 241, -276, -295, 14, 12, 9, 9, 5, 4),
        (29, 225, 234, -272, -287, 11, 10, 11, 10, 6, 9, 3, 1),
        (30, 234, 226, -276, -278, 10, 10, 11, 12, 5, 11, 2, -4, 4, 8, 3, 4,
         2, 3, -1, 0),
        (31, 247, 221, -278, -272, 9, 12, 7, 12, 6, 12, 1, -2, 1, 1, 2, 6,
         2, 3, 0, 0, -1, 0, 1, 0, 1, 2, 0, 1, 0, 0, 1, 1,
         0, 0, 0, 0),
        (32, 263, 219, -284, -268, 8, 16, 4, 8, 4, 10, 0, -1, 1, 3, 1, 2,
         0, 4, 2, 0, -1, 0, 1, 1, -1, 2, 1, -1, 0, 2, 0, -1,
         0, 0, 0, 2),
        (33, 277, 220, -290, -266, 4, 16, 2, 6, 4, 9, 0, 0, -1, 1, 2, 2,
         1, 5, -1, 0, 1, 1, 0, 0, 0, 2, -1, -2, 2, 4, -1, -2,
         1, 1, 0, -1),
        (34, 292, 224, -301, -269, 5, 17, 0, 4, -2, 9, 3, -2, 0, 2, 2, 4,
         -1, 4, 0, 1, 1, -1, 0, 2, 1, 0, -1, 1, 0, -1),
        (35, 304, 228, -310, -272, 2, 16, 1, 4, 2, 10, -2, -3, 0, 0, 2, 5,
         -1, 6, 1, 0, 0, 0, 0, 1, 1, 0),
        (36, 312, 232, -314, -275, 1, 16, 0, 2, 0, 11, 0, -3, -1, 0, 1, 6,
         0, 4, 1, 1, 0, 0, 0, 0),
        (37, 322, 236, -318, -277, -2, 14, -1, 3, -1, 9, 1, -3, -1, 0, 1, 9,
         -1, 2, 0, 0, 0, 2),
        (38, 336, 243, -325, -280, -3, 10, -1, 2, -3, 10, 0, -4, -1, 4, 0, 4,
         -1, 3, -1, 3),
        (39, 350, 251, -331, -285, -4, 7, -2, 2, -5, 9, 0, -1, 0, 0, -2, 6),
    ),
    (  # V = 1.0
        (0, 363, 271, -334, -300, -6, 4, -2, 0, -5, 4, -1, 1, -3, 5, -3, 3),
        (1, 377, 282, -337, -307, -5, 1, -6, 1, -4, 3, 2, -1, -12, 8),
        (2, 391, 293, -340, -313, -4, -1, -8, -1, -7, 2, 3, -3),
        (3, 402, 303, -338, -317, -6, -5, -10, -2, -9, 1, 4, -5),
        (4, 413, 315, -333, -323, -15, -7, -5, -6, -12, 0, -3, -2),
        (5, 426, 334, -321, -331, -31, -13, -7, -11, -12, -6, -4, -4),
        (6, 438, 358, -310, -336, -38, -18, -10, -3, 13, -1),
        (7, 443, 378, -301, -334, -42, -24),
        (8, 445, 398, -299, -332),
        (9, 436, 418, -291, -331),
        (10, 423, 427, -281, -311),
        (11, 404, 429, -265, -288),
        (12, 380, 421, -259, -242),
        (13, 354, 409, -269, -203, -44, -98),
        (14, 336, 398, -295, -202, -20, -50),
        (15, 315, 384, -317, -230, -21, 14, -32, 70),
        (16, 301, 372, -330, -254, -20, 31, -64, 95, -10, -62),
        (17, 291, 363, -337, -277, -28, 27, -35, 15, 25, -42),
        (18, 283, 356, -337, -290, -28, 12, -9, -7, 15, -22),
        (19, 276, 348, -336, -299, -22, 5, 1, -11, 8, -9),
        (20, 269, 341, -334, -310, -14, -1, 5, -16, 5, -6),
        (21, 260, 329, -332, -317, 1, -8, 2, -3, 4, -3),
        (22, 250, 314, -325, -326, 9, -4, 3, -6, 3, -5),
        (23, 243, 302, -316, -327, 9, -3, 8, -3),
        (24, 236, 288, -306, -326, 11, 1, 12, 4),
        (25, 232, 278, -299, -324, 14, 5, 12, 5),
        (26, 229, 268, -291, -319, 16, 9, 9, 6, 8, 0),
        (27, 229, 258, -286, -311, 15, 12, 9, 5, 7, 5),
        (28, 231, 249, -284, -301, 14, 11, 8, 7, 7, 6),
        (29, 236, 242, -282, -293, 10, 9, 9, 9, 6, 7, 6, 4, 2, 10),
        (30, 243, 237, -285, -287, 9, 8, 10, 9, 7, 8, 4, 8, 7, 7, -1, 0,
         4, 4, -2, 0, 2, 2, 0, 0, 1, 1, 0, 0, 0, 1, 0, 0,
         0, 0, 0, 0, 0, 0, 0, 0, 1, 0, -1, 0),
        (31, 255, 231, -287, -280, 9, 9, 10, 12, 6, 9, 3, 4, 2, 4, 0, 0,
         1, 5, 0, -1, 1, 2, -1, 0, 1, 1, 0, 0, -1, 0, 1, 1,
         0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (32, 268, 228, -290, -273, 5, 9, 7, 12, 3, 4, 2, 4, 2, 4, 0, 1,
         1, 3, 1, 1, 0, 2, -1, -1, 1, 1, 1, 0, -1, 1, 1, 1,
         0, 1, 0, -1, 0, 1, 0, 1, -1, -1, 1, 0, 0, 0, 0, 0),
        (33, 281, 230, -295, -273, 4, 12, 3, 5, 1, 7, 1, 2, 2, 4, 0, 2,
         1, 3, 1, 0, -1, 1, 1, 2, -1, -1, 2, 1, -1, 0, 1, 1,
         -1, 2, 0, 0, 1, -1, 0, 1, 0, 0),
        (34, 294, 233, -303, -273, 3, 10, 1, 5, 1, 5, 1, 3, 1, 2, 0, 4,
         0, 3, 1, 0, 0, 0, 0, 3, 1, -2, -1, 2, 0, -1, 1, 2),
        (35, 303, 236, -307, -275, 1, 10, 0, 4, 1, 5, -1, 3, 2, 1, -1, 5,
         1, 3, 0, 0, 0, 0, 1, 2, -1, -1),
        (36, 313, 240, -313, -277, 0, 8, -2, 3, 1, 6, 0, 3, 0, 1, 1, 5,
         -1, 2, 1, 0, -1, 1, 0, 1),
        (37, 324, 246, -319, -282, -2, 7, -1, 3, -1, 6, 0, 3, 0, 1, -1, 4,
         0, 2, -1, 0, 1, 1),
        (38, 338, 254, -326, -288, -3, 6, -2, 2, 0, 6, -3, 2, 0, 4, -1, 2,
         -1, 2, 1, -3),
        (39, 350, 262, -329, -294, -5, 6, -2, 1, -2, 4, -1, 3, -2, 3, -2, 3),
    ),
    (  # V = 2.0
        (0, 353, 296, -321, -314, -3, 1, 0, -2, -4, 1, -2, 0, -1, 1, -4, 2,
         -3, 2),
        (1, 361, 303, -320, -316, -4, -1, 2, -3, -5, 1, -2, -2, -3, 1, -1, 1),
        (2, 369, 311, -320, -319, -3, -2, 4, -3, -8, -4, -5, 1, 0, -2, -8, 1),
        (3, 375, 318, -316, -319, -5, -4, 1, -4, -3, -7, -8, -1, -4, -1, -5, 0),
        (4, 381, 327, -314, -321, -6, -6, 1, -7, -8, -7, -6, -4, -4, -3, -9, 2),
        (5, 385, 337, -310, -323, -7, -7, 4, -6, -13, -10, 0, -1, 2, -7, -16, 3),
        (6, 388, 348, -309, -322, -3, -7, 1, -6, -13, -4),
        (7, 389, 359, -309, -322, -1, -6, -7, -2),
        (8, 387, 369, -306, -321, -4, -7, -10, -6),
        (9, 383, 379, -303, -319, -5, -13, -9, -7),
        (10, 376, 384, -298, -311, -6, -11),
        (11, 366, 386, -292, -300, -4, -11),
        (12, 356, 385, -293, -291, 0, 3),
        (13, 342, 380, -296, -285, 0, 20, -4, 11),
        (14, 331, 374, -304, -283, -1, 19, -1, 25, -16, -20),
        (15, 317, 365, -309, -284, -7, 11, -11, 21, -9, 4, -4, -6, -8, 20),
        (16, 307, 358, -315, -292, -6, 7, -8, 14, -10, 10, -8, 2, -10, -3, -30, 26,
         -11, -10),
        (17, 298, 351, -320, -302, -5, 3, -3, 0, -12, 14, -4, -5, -3, -6, 0, -5,
         -4, 2),
        (18, 292, 345, -320, -305, -4, -2, -2, -3, -8, 5, -2, -2, 1, -5, 2, -3,
         -2, -4),
        (19, 287, 340, -320, -309, -1, -4, -2, -1, -4, 1, -2, -2, 3, -4, 4, -3,
         -3, -1),
        (20, 282, 334, -320, -312, 3, -4, -3, -1, -1, -2, 0, -3, 6, -3, 2, -3,
         -5, 2),
        (21, 277, 327, -320, -316, 6, -4, -4, 0, 4, -4, 3, 0, 5, -2, 2, -1,
         -4, 1),
        (22, 270, 318, -317, -321, 8, -1, -4, -3, 7, -1, 8, 0, 2, 0, 3, 2),
        (23, 265, 310, -314, -322, 8, -1, -1, -1, 8, 1, 7, 3, 5, -1, 0, 2),
        (24, 261, 301, -312, -323, 8, 0, 2, -2, 8, 4, 8, 1, 7, 6),
        (25, 258, 294, -310, -323, 8, 0, 5, 1, 7, 3, 8, 7),
        (26, 256, 287, -307, -322, 8, -1, 6, 3, 9, 6, 8, 7),
        (27, 255, 280, -304, -320, 9, 3, 5, 3, 9, 7, 9, 9, -1, 0),
        (28, 256, 273, -302, -315, 8, 5, 6, 3, 8, 9, 7, 5, 1, 2),
        (29, 259, 268, -300, -311, 6, 4, 6, 6, 8, 8, 5, 5, 1, 1, 5, 6,
         2, 1),
        (30, 264, 262, -302, -305, 6, 5, 7, 6, 6, 7, 5, 6, 3, 1, 3, 5,
         2, 3, 3, 4, -1, 0, 0, 0, 2, 2, 1, 2, 0, 0, 0, 0,
         -1, -1, 1, 1, -1, -1, 1, 0, -1, 0, 1, 0, -1, 0),
        (31, 271, 258, -300, -301, 6, 7, 5, 7, 5, 5, 6, 7, 2, 4, 2, 1,
         0, 2, 2, 3, -1, -1, 1, 3, 0, 0, 1, 1, -1, 0, 1, 0,
         -1, 1, 1, 0, -1, 0, 1, 0, 0, 0, 0, 0, -1, 0, 1, 0,
         -1, 0),
        (32, 280, 257, -300, -298, 4, 9, 1, 3, 6, 7, 3, 6, 1, 2, 1, 2,
         1, 2, 1, 1, 0, 1, 0, 2, 1, 0, 0, 1, 0, 0, 0, 1,
         0, 0, 0, 1, 1, 0, 0, 0, -1, 0, 1, 0, 0, 0, -1, 0,
         1, 0),
        (33, 289, 258, -302, -295, 3, 8, 1, 1, 2, 6, 2, 5, 1, 2, 0, 3,
         2, 1, -1, 2, 1, 1, 0, 0, 0, 2, 1, -1, -1, 1, 1, 1,
         0, 2, 0, -1, 0, 1, 1, 0, -1, 0, 0, 0),
        (34, 298, 261, -305, -296, 1, 8, 0, -1, 2, 7, 0, 3, 1, 2, 0, 5,
         1, 0, 0, 1, 1, 1, -1, 1, 1, 0, 0, 2, 0, -2, 0, 2,
         0, 2, 0, 0),
        (35, 307, 265, -309, -298, 0, 7, -1, -2, 1, 7, 0, 3, 0, 3, 0, 2,
         1, 2, 0, 1, 0, 0, 0, 2, 0, 0, 0, -1, -1, 0),
        (36, 316, 269, -313, -299, -1, 4, -1, -1, 0, 7, -1, 2, 1, 2, -1, 2,
         -1, 2, 1, 2, 0, 0, -1, 0, 1, 2, 0, -2),
        (37, 328, 275, -318, -300, -1, 1, 0, -2, -3, 6, -1, 2, -1, 1, 0, 3,
         -1, 2, -1, 1, 1, -1, 0, 2, -1, 0),
        (38, 338, 283, -320, -306, -3, 1, 0, -2, -4, 4, 0, 2, -1, 2, -1, 1,
         -2, 4, 1, -2, -2, 2),
        (39, 346, 289, -322, -310, -2, 2, 0, -2, -4, 1, -2, 2, -2, 2, -2, 2,
         -1, 0, 1, 0),
    ),
    (  # V = 3.0
        (0, 353, 307, -317, -317, -3, -1, 0, -1, -3, 0, -1, -1, -5, 1, 1, -1,
         -4, 1, -3, 0),
        (1, 359, 313, -316, -318, -4, -2, 2, -2, -4, -2, -2, -1, -6, 1, 0, -1,
         -1, -2, -1, -1),
        (2, 365, 319, -315, -319, -6, -2, 3, -4, -3, -3, -6, -3, -6, 1, 0, -2,
         -2, -2, -2, -2),
        (3, 369, 325, -314, -320, -5, -3, 1, -4, -3, -4, -5, -5, -10, -1, 0, -2,
         -1, -2, 1, -4),
        (4, 373, 331, -315, -321, -4, -4, 0, -5, -6, -5, -3, -4, -7, -3, -5, 0,
         3, -1, 3, -4),
        (5, 376, 339, -316, -322, -1, -4, -6, -5, -7, -3, -3, -6, -6, -1, -3, -3),
        (6, 377, 348, -316, -324, -2, -5, -10, -6, -5, -3, -5, -1),
        (7, 377, 355, -316, -323, -6, -7, -9, -6, -4, -2),
        (8, 375, 363, -316, -324, -6, -8, -9, -8, -3, -4),
        (9, 370, 370, -312, -323, -8, -11, -7, -7, -4, -6),
        (10, 365, 375, -311, -322, -6, -10, -6, -5),
        (11, 359, 378, -309, -318, -6, -9, -5, -5),
        (12, 351, 379, -306, -313, -6, -8, -4, -6),
        (13, 341, 377, -305, -306, -6, -8, -5, 2, -2, -3),
        (14, 332, 373, -309, -303, -3, -2, -3, 4, -5, -5, -3, 1),
        (15, 318, 364, -309, -299, -3, 3, -5, 5, -8, 2, -5, 0, -3, -2),
        (16, 309, 358, -313, -304, -2, 6, -4, 4, -7, 3, -2, 0, -6, 5, -1, -7,
         -8, 8, -4, -5, -3, -2, -2, -2),
        (17, 300, 350, -316, -308, -4, 0, 0, -1, -7, 5, 0, -3, 0, -2, -2, -4,
         0, -2, -4, 1, 0, -2, 3, -5),
        (18, 294, 344, -317, -310, -1, -2, 0, -4, -5, 2, 1, -3, 0, -2, 2, -4,
         2, -1, -2, -1, -2, 2, -2, 0),
        (19, 289, 339, -316, -311, 0, -5, 1, -3, -3, 1, 1, -1, 2, -4, 2, -1,
         2, -2, -1, 0, -1, 0, -3, 0),
        (20, 284, 334, -315, -314, 2, -4, 2, -2, -1, -1, 0, 0, 3, -4, 2, 0,
         2, -3, 2, -1, -1, 0, -4, 1),
        (21, 280, 327, -316, -315, 5, -4, 3, -2, -2, -1, 4, -1, 2, -1, 3, -1,
         2, -1, 2, 1, 1, -2, -4, 1),
        (22, 274, 319, -314, -318, 8, -2, 0, -2, 3, -1, 4, -1, 3, 1, 2, -1,
         4, 1, 1, 1, 0, -2),
        (23, 270, 312, -313, -320, 9, 0, 3, -1, 2, 0, 5, 2, 2, -1, 4, 1,
         2, 0, 2, 0),
        (24, 266, 305, -310, -321, 8, -1, 5, 2, 1, -1, 7, 3, 1, 0, 7, 4,
         3, 2),
        (25, 264, 298, -310, -321, 11, 2, 3, 0, 3, 1, 6, 3, 4, 1, 4, 6),
        (26, 262, 292, -306, -321, 10, 4, 3, -1, 4, 2, 5, 4, 4, 2, 3, 5),
        (27, 262, 286, -304, -318, 10, 4, 2, 1, 6, 4, 3, 1, 3, 4, 6, 5),
        (28, 263, 280, -301, -313, 6, 3, 5, 4, 4, 3, 3, 1, 4, 5, 4, 3,
         1, -1),
        (29, 266, 276, -301, -311, 6, 4, 5, 4, 4, 4, 2, 3, 3, 2, 3, 3,
         1, 1, 4, 4, 0, 0),
        (30, 271, 272, -303, -308, 5, 5, 6, 6, 2, 1, 3, 4, 3, 2, 2, 2,
         2, 4, 3, 2, 1, 2, 0, 0, 2, 3, 1, 0, -1, 1, 1, -1,
         0, 2, 1, 1, -1, -1, 1, 0, 0, 1, 0, 0, 0, 0, 0, -1,
         0, 0),
        (31, 278, 269, -304, -306, 5, 6, 5, 6, 2, 3, 3, 3, 3, 3, 3, 2,
         1, 4, 1, 2, 1, -1, 0, 2, 0, 2, 1, 0, 0, 0, 0, 0,
         1, 2, -2, -1, 1, 0, 1, 1, -1, 0, 1, 0, 0, 0, -1, 0,
         1, 0),
        (32, 285, 267, -304, -302, 4, 6, 3, 5, 1, 2, 4, 6, 0, 0, 2, 3,
         2, 3, 0, 1, 0, 1, 1, 0, 0, 2, 1, 0, 0, 1, 0, -1,
         0, 2, -1, 0, 2, 0, -1, 0, 1, 0, -1, 1, 1, 0, 0, 0,
         0, 0),
        (33, 292, 268, -305, -302, 3, 7, 3, 5, 0, 1, 2, 5, 0, 1, 1, 2,
         1, 2, 0, 2, 1, 0, 0, 1, 0, 2, 0, -1, 0, 1, 1, 1,
         0, 0, 0, -1, 0, 2, 0, 0, 1, -1, -1, 2, 0, -1),
        (34, 300, 270, -307, -301, 1, 6, 1, 2, 0, 3, 2, 3, 0, 3, 0, 1,
         1, 2, 0, 2, 0, 0, 0, 0, 1, 2, 0, 0, 0, 1, 0, 0,
         0, -1, 0, 2, 0, 0, 0, 0, 0, 0),
        (35, 309, 274, -311, -303, 1, 5, -1, 1, 0, 4, 0, 2, 1, 3, 0, 2,
         0, 0, 0, 3, 0, 0, 0, 0, 1, 1, -1, 0, 0, 2, 1, -2,
         -1, 1, 0, 1, 0, 0),
        (36, 317, 279, -313, -306, -1, 4, 0, 2, -1, 2, -1, 2, 0, 2, 0, 4,
         0, -2, -1, 4, 1, 0, -1, 0, 0, 1, 1, -2, -1, 3, 0, -2,
         0, 0),
        (37, 327, 286, -314, -310, -3, 5, 0, -1, -2, 2, -1, 3, 0, 1, -1, 1,
         -1, 1, -1, 2, 1, -1, -2, 3, 0, 0, 3, -4, -3, 4),
        (38, 337, 294, -315, -314, -4, 3, -2, 0, -2, 1, -1, 1, -2, 0, 0, 2,
         -3, 2, 0, 0, 1, -3, -4, 5, 2, 0),
        (39, 345, 300, -316, -315, -4, 1, -1, -1, -2, 1, -2, -1, -2, 2, -2, 0,
         -2, 1, 1, 1, -1, -2),
    ),
    (  # V = 4.0
        (0, 342, 311, -312, -318, -2, 0, 0, -1, -3, 0, 1, -1, -3, -1, -2, 1,
         3, -2, -4, 1, -5, 2, 1, -2),
        (1, 346, 315, -311, -317, -2, -2, 0, -2, -3, 0, 0, -1, 0, -2, -5, 0,
         3, -1, -3, 1, -7, 0, 3, 1),
        (2, 351, 320, -310, -318, -3, -1, 1, -3, -4, -1, 0, -2, -1, -2, -3, -1,
         -2, -2, -4, 0, -5, 2, 1, -2),
        (3, 354, 324, -309, -318, -2, -2, 0, -2, -4, -3, -3, -2, 0, -2, -6, -3,
         -2, -1, -1, -2, -5, 3, 1, -3),
        (4, 358, 329, -308, -317, -4, -3, 0, -3, -4, -4, -4, -1, -3, -3, -9, -2,
         4, -1, -3, 1, 1, -2, 2, 0),
        (5, 362, 337, -310, -320, -5, -4, -1, -2, -5, -3, -8, -3, 0, 0, -8, -1,
         5, 0),
        (6, 365, 344, -311, -320, -8, -6, -4, -5, -6, -2, -6, -4, 0, -1),
        (7, 366, 350, -311, -319, -10, -9, -7, -5, -6, -3, -9, -3, 5, 0),
        (8, 366, 359, -313, -323, -10, -10, -8, -6, -7, -4, -8, -5),
        (9, 363, 365, -312, -322, -11, -12, -7, -7, -8, -7, -8, -5),
        (10, 359, 370, -311, -321, -10, -13, -8, -10, -9, -4, -5, -9),
        (11, 354, 373, -310, -319, -9, -12, -8, -12, -6, -6, -8, -9),
        (12, 348, 373, -309, -314, -7, -11, -8, -13, -5, -7, -8, -9),
        (13, 338, 371, -305, -309, -7, -9, -6, -9, -4, -6, -6, -12),
        (14, 331, 368, -308, -308, -5, -3, -3, -4, -4, -6, -2, -13, -1, 6),
        (15, 319, 360, -310, -304, -1, 2, -4, 3, -4, -5, -5, 0, -3, -5, -4, 8,
         0, -7),
        (16, 311, 355, -312, -308, -2, 6, -3, 1, -4, 4, -5, 3, -2, -3, 0, -8,
         -4, 7, -8, 10, 2, -10, 4, -10, -13, 17, -12, 8),
        (17, 301, 347, -313, -312, -3, 5, -3, -2, -2, 3, -3, 1, 1, -7, -1, -2,
         0, -1, 1, -4, 0, -1, -3, 0, 2, -2, -2, 5, -8, 6),
        (18, 296, 342, -314, -314, -2, 1, -2, -1, -2, -2, -4, 2, 7, -8, -2, 0,
         2, -1, 4, -5, -1, 0, -5, 4, 3, -3, -1, 2, -2, -3),
        (19, 292, 337, -314, -314, -1, -1, -1, -2, 0, 0, -4, 0, 7, -6, 0, 0,
         1, 0, 4, -4, 0, 0, -3, 1, 0, 0, 0, -1, 1, 0),
        (20, 288, 333, -313, -316, -1, -1, 1, -2, 1, -1, -4, 1, 8, -4, 1, -2,
         -1, 0, 4, -2, 1, -1, 0, 0, 0, 1, -2, -1, 2, 0),
        (21, 284, 327, -313, -316, 2, -3, 0, 0, 0, -2, 2, -1, 4, -1, 3, -1,
         0, 0, 3, -1, 2, 0, 0, -1, 0, 1, 0, -1),
        (22, 280, 321, -312, -319, 2, -1, 1, -2, 2, 0, 3, -1, 3, -1, 3, 0,
         2, 0, 1, 0, 3, 0, 3, 2, -2, 0),
        (23, 276, 315, -309, -319, 1, -2, 3, 0, 1, -2, 4, 1, 3, 0, 4, 2,
         2, 0, 3, 0, 1, 1, 2, 1),
        (24, 274, 309, -310, -320, 5, -1, 0, -1, 3, 0, 5, 1, 1, 2, 8, 2,
         -2, -1, 5, 2, 0, 0),
        (25, 273, 304, -310, -321, 6, 1, 0, -3, 3, 2, 7, 3, -1, -1, 9, 6,
         -4, -4, 6, 6),
        (26, 272, 299, -308, -320, 6, 0, 0, -1, 5, 2, 4, 1, 1, 2, 4, 1,
         1, 3),
        (27, 273, 295, -307, -320, 5, 2, 1, -1, 6, 4, 1, 1, 2, 1, 1, 1,
         7, 6),
        (28, 275, 291, -307, -317, 5, 2, 0, -1, 6, 4, 2, 2, 1, 1, 3, 2,
         2, 2, 2, 3),
        (29, 278, 288, -307, -316, 4, 2, 1, 1, 5, 5, 1, 1, 2, 0, 3, 3,
         1, 2, 2, 1, 2, 1, 2, 5),
        (30, 282, 284, -308, -312, 3, 2, 0, 1, 6, 4, 1, 3, 2, 0, 1, 2,
         2, 1, 1, 1, 3, 3, 3, 3, 1, 2, -1, 1, 1, 0, 1, 1,
         0, 0, 0, -1, -2, -2, 2, 3),
        (31, 286, 282, -306, -311, 1, 3, 2, 1, 3, 4, 2, 3, 2, 2, 2, 1,
         2, 2, 0, 0, 3, 5, 0, 0, 1, 1, 0, 1, 0, 1, 0, -1,
         0, 0, 1, 0, -1, 1, 0, 0),
        (32, 291, 280, -306, -308, 1, 2, 2, 4, 1, 2, 2, 2, 1, 2, 3, 3,
         0, 2, 1, -1, 1, 4, 0, 1, 0, -2, 1, 3, 0, 0, -1, -1,
         2, 0, -1, 1, 0, 0, -1, 0),
        (33, 296, 281, -306, -309, 0, 5, 3, 2, 0, 2, 1, 2, 1, 3, 1, 0,
         0, 2, 0, 1, 2, 3, 0, 0, -1, 0, 1, 1, 1, 1, -1, -2,
         -1, 1, 1, 1, 0, -1, 0, 1),
        (34, 302, 283, -308, -309, 0, 4, 2, 2, -1, 2, 2, 2, 0, 1, 0, 1,
         0, 3, 1, 0, 0, 3, 1, -1, -1, 1, 0, 0, 1, 2, -1, -2,
         1, -1, 0, 4, 0, -1, 1, -1),
        (35, 309, 286, -310, -310, 1, 4, -1, 1, 0, 2, 0, 2, 0, 0, 0, 1,
         0, 2, 0, 2, 0, 1, 0, 1, 1, -1, -1, 1, 0, 0, 0, 1,
         0, -2, 1, 2, -1, 1, 0, -1),
        (36, 316, 290, -311, -311, -1, 1, -1, 3, 0, 1, -1, 1, 0, 2, 0, 1,
         0, -1, -1, 0, 0, 5, 0, 0, 0, -1, -1, 1, 1, -1, 0, 1,
         0, 1, -1, -1, 1, 1),
        (37, 323, 295, -312, -313, -1, 1, -1, 1, -1, 2, -1, 0, 0, 2, -1, 0,
         0, 0, 0, 0, -2, 3, 0, 0, 0, 2, 0, -2, 1, -3, -2, 5,
         -1, 0),
        (38, 331, 301, -313, -315, 0, 0, -2, 1, -3, 2, 1, -2, -1, 2, -2, 0,
         1, -1, -1, 1, -2, 2, -2, -1, 2, 0, -2, 2, 3, -3),
        (39, 337, 306, -313, -316, 0, 0, -2, -1, -3, 1, 0, -1, -1, 1, -1, -1,
         0, 0, -1, -1, -6, 4, 3, -2, 0, -1),
    ),
    (  # V = 5.0
        (0, 333, 313, -307, -317, 0, -1, 0, -1, -4, 0, 3, -2, -6, 2, 3, -2,
         -2, 0, 1, 0, -7, 0, 2, 2, -4, 0, -1, 1),
        (1, 336, 316, -306, -317, 0, -1, -1, -1, -1, -1, 1, -2, -6, 1, 2, -2,
         -1, -1, 0, 0, -9, 1, -1, 1, -1, 0, -2, 1),
        (2, 339, 319, -304, -316, -1, -1, -1, -2, 1, -1, -2, -3, -5, 1, 3, -3,
         -2, 0, -6, -1, -2, 0, -6, 1, 0, 1, -2, 0),
        (3, 343, 323, -305, -317, -1, 0, 1, -2, -1, -3, -2, -2, -4, -1, 0, -2,
         -5, -1, -3, -1, -1, 1, -3, 0, -7, 0, 4, 0),
        (4, 347, 328, -306, -316, 1, -2, -1, -2, -1, -3, -3, -2, -8, -3, -2, 0,
         -1, -2, -1, -1, 0, -1, -3, 1, -3, -1),
        (5, 351, 334, -309, -319, 2, 0, -1, -3, -5, -4, -8, -1, -5, -3, -5, 0,
         4, -1, -5, 1),
        (6, 353, 340, -309, -319, 1, -1, -4, -5, -8, -5, -7, -2, -4, -2, -2, -1,
         -3, -1),
        (7, 354, 345, -309, -319, 0, -2, -7, -5, -9, -5, -6, -4, -6, -3, 0, 1),
        (8, 355, 351, -310, -318, -2, -4, -9, -8, -9, -6, -6, -4, -1, -3, -5, 1),
        (9, 353, 357, -309, -319, -3, -4, -10, -11, -9, -7, -5, -3, -2, -3),
        (10, 350, 362, -308, -318, -4, -6, -10, -13, -8, -6, -5, -5, -1, -4),
        (11, 347, 364, -309, -316, -3, -5, -10, -13, -7, -9, -4, -6, -2, -1),
        (12, 342, 365, -308, -314, -3, -5, -7, -11, -8, -11, -4, -6, -2, -3),
        (13, 335, 364, -308, -314, -1, 1, -5, -9, -8, -12, -2, -7, -4, -3),
        (14, 329, 361, -310, -312, -1, 2, -2, -3, -5, -8, -3, -9, -2, -7, -3, -2),
        (15, 319, 356, -311, -313, 0, 6, -2, 1, -2, 1, -4, -5, -2, -7, 0, -7,
         0, -1, -4, 5),
        (16, 311, 351, -311, -314, 0, 5, -3, 4, -2, 2, -4, 3, -1, -5, -4, 3,
         -1, -1, -3, 1, 2, -8, -3, 3, -4, 2, -2, 5, -4, 0, 1, -3),
        (17, 303, 345, -312, -316, -1, 2, -3, 2, -1, 0, -4, 3, 0, -2, -2, 1,
         -3, -1, 3, -5, 0, -1, 1, -3, -1, -1, 0, -1, -4, 4, 3, -4),
        (18, 298, 339, -312, -315, -1, -1, -3, 2, 0, -3, -5, 3, 4, -6, -2, 2,
         0, -2, 4, -4, -1, -1, -1, 3, 2, -4, 0, 1, -4, 1, 1, 2),
        (19, 295, 336, -312, -317, -1, -2, -2, 3, 0, -4, -4, 3, 6, -4, -3, -1,
         1, 1, 4, -4, 0, 0, -1, 0, 2, -2, 1, 0, -4, 1, -2, 0),
        (20, 291, 331, -311, -316, 1, -2, -3, 1, 2, -2, -5, 2, 7, -4, -2, 0,
         1, 0, 3, -3, 0, 0, 1, -1, 3, -1, 0, 0, -4, 2, -2, 1),
        (21, 288, 327, -310, -317, 1, -2, -3, 1, 1, -2, -1, -1, 6, -2, -3, 0,
         3, 0, 2, -2, 1, 0, 3, 0, 2, -1, -1, 1, 0, -1, -4, 1),
        (22, 284, 321, -309, -317, 2, -2, -3, -1, 1, -1, 1, 0, 8, 0, -5, -2,
         2, 0, 4, 1, 3, -1, 1, 1, 2, -1, 1, 1, 0, 0),
        (23, 281, 316, -307, -317, 0, -1, 0, -3, 1, 0, 1, 0, 6, 0, -1, 0,
         0, 0, 4, 0, 3, 1, 3, 0, 2, 2),
        (24, 280, 311, -309, -318, 1, -2, 2, 0, 1, -1, 2, 0, 5, 2, -2, -1,
         2, 0, 4, 1, 1, 2, 5, 1),
        (25, 279, 307, -309, -319, 2, -1, 2, 0, 1, -1, 1, 0, 6, 2, -1, 0,
         4, 1, -2, -1),
        (26, 279, 303, -309, -318, 3, -3, 1, 0, 3, 1, 1, -1, 3, 3, 0, -1,
         4, 2, 3, 2),
        (27, 280, 300, -309, -319, 3, -1, 2, 1, 2, 0, 1, 0, 3, 3, 1, -1,
         3, 3, 3, 3),
        (28, 282, 297, -309, -318, 2, 0, 2, 0, 2, 2, 2, 0, 1, 3, 2, -1,
         3, 5, 1, -2, 0, 3),
        (29, 285, 294, -310, -316, 2, -1, 2, 2, 2, 1, 1, 1, 3, 3, 1, -1,
         0, 2, 2, 2, 2, 1, -1, 0),
        (30, 288, 292, -310, -315, 1, -1, 2, 3, 1, 1, 2, 2, 1, 1, 2, 0,
         1, 2, 2, 1, 2, 4, -2, -3, 2, 2, 1, 1, 2, 1, -2, 1),
        (31, 292, 291, -310, -315, 0, -1, 4, 3, 1, 4, 0, -1, 1, 2, 3, 2,
         0, 1, 2, 1, 3, 3, -1, -1, 0, 2, 2, 1, -1, 0, 0, 0,
         0, 0),
        (32, 296, 291, -310, -316, 1, 0, 1, 5, 3, 2, -1, 1, 2, 1, 0, 2,
         3, 2, 0, 1, 1, 1, 0, 0, 0, 0, 1, 2, -1, -1, 0, 1,
         1, 1, 0, -1),
        (33, 300, 291, -310, -315, 1, 1, 1, 3, 2, 4, 0, -1, 1, 3, 1, 1,
         0, 2, 0, 0, 0, 1, 1, 0, 1, 2, -2, -2, 2, 3, -1, -2,
         0, 1, 1, 0, 0, 2),
        (34, 305, 293, -311, -316, 0, 2, 2, 2, 0, 3, 0, 0, 1, 3, -1, 0,
         2, 1, -1, 2, 1, 0, 0, 0, 1, 2, -1, 0, -1, -1, 0, 0,
         2, 1, -1, 1, 1, 1, 0, 0),
        (35, 310, 296, -310, -317, -1, 2, 1, 1, -1, 3, 0, 0, 1, 2, -1, 1,
         0, 0, 0, 2, 1, -1, -1, 3, 0, -1, 1, 1, -1, 0, 0, -1,
         1, 1, -1, 1, 0, 2, 1, -2),
        (36, 315, 299, -310, -317, -1, 0, 0, 1, -1, 4, 0, -1, -1, 2, 0, 0,
         0, 1, 0, 1, 0, 0, -1, 2, 1, -2, -1, 3, 0, -1, 0, 1,
         0, -2, 0, 1, 0, 3, 0, -1),
        (37, 320, 302, -310, -317, 0, 0, -1, 0, -2, 3, 1, 0, -2, 0, 0, 2,
         0, 0, -1, 0, 0, 0, 0, 3, -1, -2, 0, 1, 0, 0, 0, 1,
         -1, 0, 2, -2),
        (38, 326, 307, -310, -319, 1, 1, -1, 0, -3, 1, 1, -1, -2, 2, 0, -1,
         -1, 1, 0, 0, -1, 1, 0, -1, -2, 1, -1, 1, 1, 0, -1, 0),
        (39, 330, 310, -308, -318, -1, 0, -1, -1, -2, 1, 1, -1, -4, 1, 2, -1,
         -3, 0, 2, 0, -4, 1, 1, 0, -4, 1, 1, 1, 0, -1),
    ),
    (  # V = 6.0
        (0, 329, 314, -307, -317, 1, -1, -4, 1, 3, -2, -1, 0, -2, -1, 4, -1,
         -5, 1, -1, -1, -3, 1, 0, 0, -3, 0, 0, 2),
        (1, 332, 317, -307, -318, 1, 1, -2, -2, 1, 0, 0, -2, -3, 0, 3, -2,
         -3, 1, -3, 0, -3, -1, -3, 0, 1, 1, -5, -1),
        (2, 334, 319, -305, -316, 0, -1, -2, -1, 2, -1, -1, -2, -2, 0, 2, -1,
         -3, -1, -5, -1, -2, 0, -4, 0, -3, 1, 3, -2, -3, 0),
        (3, 338, 323, -307, -317, 0, -1, 1, -1, 2, -1, -4, -1, 1, -2, -2, -1,
         -2, -1, -7, -2, 2, 1, -8, 0, -1, -1, 2, -1, -3, 0),
        (4, 342, 327, -307, -316, -2, -2, 2, -1, 1, -1, -2, -2, -2, -2, -5, -2,
         0, 0, -4, -2, -1, 0, -4, 1, -3, -1, 2, 0, 1, -2),
        (5, 345, 332, -309, -317, 1, -2, -2, -2, 1, -1, -3, -2, -6, -2, -6, -2,
         -3, -1, -2, -2, -6, 2),
        (6, 347, 337, -310, -318, 2, 0, -3, -4, -3, -3, -5, -2, -6, -3, -4, -2,
         -6, -2, 1, 1),
        (7, 349, 342, -312, -319, 1, 0, -2, -5, -6, -2, -5, -5, -8, -3, -2, -1,
         -7, -3, 1, -1),
        (8, 349, 348, -312, -319, 1, -3, -5, -4, -6, -5, -6, -5, -6, -4, -4, -1,
         -3, -4),
        (9, 348, 354, -312, -321, 0, -2, -4, -7, -8, -5, -7, -7, -4, -2, -3, -4,
         -3, -1),
        (10, 346, 358, -313, -320, 2, -3, -6, -7, -8, -8, -7, -7, -1, -1, -5, -6),
        (11, 343, 360, -311, -320, -1, 0, -5, -8, -7, -10, -6, -7, -2, -2, -4, -7),
        (12, 340, 361, -312, -319, 0, 0, -4, -6, -7, -10, -5, -9, -2, -2, -4, -8),
        (13, 334, 361, -311, -318, 0, 0, -2, -1, -6, -12, -4, -8, -3, -4, -4, -9),
        (14, 329, 359, -312, -317, -1, 1, -1, 1, -3, -6, -3, -8, -3, -7, -1, -8,
         -1, -2),
        (15, 319, 355, -310, -318, -2, 3, 0, 5, -3, -2, -1, -3, -2, -1, -1, -10,
         -1, -7, 0, -5, 0, 4),
        (16, 311, 350, -310, -318, 0, 4, -2, 2, -2, 1, -2, 2, -3, 3, -1, -4,
         -2, 2, 0, -4, -1, 0, -3, 6, 2, -6, -4, 5, -3, -1, 3, -8),
        (17, 304, 344, -311, -318, -1, 0, -1, 2, -2, 1, -1, -1, -2, 4, -1, -2,
         -3, 1, 0, -1, 0, -2, -2, 1, 0, -3, 1, -1, -4, 1, 0, 0,
         1, -1),
        (18, 299, 338, -311, -316, 0, -2, -2, -1, 0, 0, -4, 2, 2, -3, -1, 0,
         0, -1, -1, 0, 0, -1, 0, 0, 1, -1, 0, -1, -3, 2, 2, -3,
         -4, 2),
        (19, 296, 334, -311, -316, 0, -3, 0, 1, -1, -1, -2, 1, 1, -2, 0, -1,
         -1, 1, 2, -1, 0, -1, -1, -1, 2, 0, 0, 0, -3, 0, 2, 0,
         -2, 0),
        (20, 293, 330, -311, -316, 2, -2, -1, 0, 0, 0, -2, -1, 3, 0, -2, -2,
         1, 1, 0, -1, 2, -1, -1, 0, 3, -2, 0, 0, -2, 1, 1, -1,
         -3, 3),
        (21, 290, 327, -310, -317, 3, -2, -3, -1, 2, -1, -2, 1, 3, -2, -1, 0,
         1, -1, 1, 0, 1, -1, -1, 0, 3, 0, 4, -1, -3, 1, 0, -2),
        (22, 287, 322, -309, -318, 1, -1, 1, -1, 0, 0, 0, -1, 2, -1, 1, 1,
         1, -1, 0, -1, 0, -1, 1, 2, 4, -1, 4, 0, -1, 1),
        (23, 285, 317, -310, -317, 3, -1, 1, -1, 0, -1, 1, 0, 3, 0, -1, 0,
         2, -1, -1, 0, 1, 0, 2, 1, 4, -1),
        (24, 284, 313, -310, -318, 2, -1, 2, -1, 1, 0, 0, -1, 3, 1, 0, -1,
         2, 1, -1, 0, 2, 0, 1, 0),
        (25, 284, 310, -311, -319, 1, -2, 3, 0, 3, 0, -2, -1, 4, 2, -1, -1,
         4, 2, 0, -1, 1, -1),
        (26, 284, 306, -310, -318, 0, -3, 3, 0, 2, 0, 2, 0, 0, 0, 0, 1,
         5, 1, -1, 2),
        (27, 285, 304, -310, -320, 0, -1, 3, 0, 2, 0, 0, 0, 3, 1, -1, 0,
         3, 2, 3, 2, 1, 1),
        (28, 287, 301, -310, -318, -1, -2, 3, 1, 2, 1, -1, -2, 3, 3, -1, -1,
         4, 3, 3, 3, 2, 2, -3, -2),
        (29, 290, 299, -312, -318, 1, -1, 1, 1, 3, 1, -2, -1, 3, 2, 0, -1,
         5, 5, 0, 1, 1, 2, 0, -1),
        (30, 292, 298, -311, -318, -1, -2, 3, 3, 1, 1, -1, -1, 1, 1, 0, 0,
         7, 7, -2, -2, 3, 2, 0, 0, -1, 0),
        (31, 296, 296, -312, -317, 0, -1, 3, 4, 0, 0, -1, -1, 2, 1, -1, 1,
         6, 5, 0, 0, 1, 1, 0, 1, -1, -3),
        (32, 299, 296, -312, -317, 1, -1, 2, 4, 0, 1, 0, -1, 1, 2, 1, -1,
         2, 6, -1, -2, 1, 2, 2, 2, -1, -3, 0, 2),
        (33, 302, 296, -311, -316, 0, -1, 2, 3, 0, 1, 2, 2, -1, 1, 2, 0,
         -1, 3, 1, -2, 0, 2, 1, 1, -1, -1, 0, 2, 1, -1, 0, 1),
        (34, 305, 297, -310, -316, 0, 0, 1, 2, -1, 1, 2, 2, -1, 0, 1, 1,
         0, 2, 0, -1, 0, -1, 1, 4, 0, -1, -1, 0, 1, 1, 0, 1,
         0, 0, 0, 2),
        (35, 311, 299, -311, -315, -1, -2, 1, 3, -1, 0, 1, 2, -1, 1, 1, 0,
         0, 1, -1, -1, 0, 1, 1, 2, -1, -2, 0, 3, 0, -2, 0, 2,
         0, 1, 1, 1),
        (36, 315, 302, -312, -317, 2, 0, -2, 1, 0, 1, 0, 1, 0, -1, -1, 3,
         0, 0, 0, -2, 0, 3, -1, 0, 1, -1, -1, 1, 1, 2, -1, -1,
         0, 1, 0, 1),
        (37, 319, 305, -311, -317, 1, -1, -1, 2, -1, 0, 0, -1, 0, 2, 0, -1,
         -2, 2, 1, -1, -1, 2, 0, -1, -1, 1, 0, 1, 1, -1, -1, 1,
         -1, 1, 0, 1),
        (38, 323, 309, -309, -318, 1, -1, -2, 2, -1, 0, 1, -1, -1, -1, 0, 2,
         -1, -1, 1, -1, -4, 4, -1, -1, 3, -1, -4, 2, 0, 1, 1, -2),
        (39, 326, 311, -308, -316, 2, -2, -5, 1, 2, -1, 0, -1, -1, 1, 0, -2,
         -3, 2, 3, -2, -4, 3, -2, -1, -1, 1, -1, 0, -2, 1),
    ),
    (  # V = 7.0
        (0, 326, 315, -307, -317, 1, -1, 0, 0, -1, -1, 3, -1, -2, 0, -1, 0,
         -1, 0, -3, 1, -2, -1, 2, -2),
        (1, 328, 317, -306, -317, 1, 0, 0, -1, -1, -1, 4, 0, -4, -2, 1, 0,
         -5, 0, -2, 0, -3, -1, 4, 1),
        (2, 331, 319, -307, -316, 2, -1, 0, 0, -1, -2, 3, -1, -3, 0, 0, -2,
         -5, 0, -3, 0, -1, -1, 1, -1),
        (3, 334, 322, -307, -316, 1, 0, 3, -2, -4, -1, 4, 0, -3, -2, 0, -1,
         -8, -2, -1, 0, 0, -1, -4, 0, 0, 0),
        (4, 336, 325, -305, -314, 0, -2, 2, -1, -4, -1, 4, -1, -3, -2, -1, -1,
         -10, -3, 2, 1, 1, -1, -6, -2, 1, -1),
        (5, 339, 330, -306, -316, 0, -1, -1, -2, -2, -2, 3, 0, -3, -1, -8, -3,
         -4, -2, -6, 0, 0, -1, -4, 0),
        (6, 342, 335, -309, -317, 1, -1, -3, -3, 0, -1, -1, -2, -6, -2, -5, -3,
         -7, -2, -2, -1, -1, 1),
        (7, 344, 340, -311, -319, 1, 0, -3, -3, -3, -3, -1, -2, -7, -3, -5, -3,
         -5, -3, -4, 0, 2, -1),
        (8, 344, 345, -310, -318, -2, -3, -2, -4, -3, -2, -4, -4, -6, -4, -5, -3,
         -3, -2, -5, -1),
        (9, 344, 351, -312, -322, -1, -2, -3, -3, -2, -3, -6, -6, -6, -5, -4, -3,
         -4, -3, -1, 0),
        (10, 342, 354, -312, -319, -1, -4, -3, -5, -2, -2, -7, -8, -6, -5, -2, -3,
         -4, -4, 0, 0),
        (11, 340, 356, -312, -319, -2, -4, -2, -2, -2, -5, -7, -9, -5, -4, -2, -4,
         -4, -4),
        (12, 337, 357, -312, -319, -1, -2, -1, -3, -3, -3, -7, -11, -3, -4, -4, -5,
         -2, -5),
        (13, 333, 357, -313, -319, 0, -1, -1, -1, -2, -1, -5, -11, -2, -5, -4, -7,
         -4, -6),
        (14, 328, 356, -312, -319, -2, -1, 0, 2, -1, 0, -3, -6, -2, -7, -3, -9,
         -3, -5, 1, 1),
        (15, 319, 352, -311, -319, -1, 1, 0, 3, -2, 2, -1, -1, -1, -1, -1, -7,
         -1, -6, -1, -6, 0, 1, 0, -4),
        (16, 312, 347, -311, -318, 0, 1, -1, 3, -2, 1, -1, 2, -1, 1, -3, 1,
         0, -3, -2, 2, 0, -4, -2, 5, 1, -7, 0, 1, 1, -3, 0, 3),
        (17, 305, 341, -311, -318, 0, 0, -1, 3, -1, 1, -3, 0, 1, -1, -2, 1,
         0, 0, -3, 0, 0, 1, 0, -3, -4, 3, -1, -2, -3, 2, 3, -4,
         -5, 2),
        (18, 300, 337, -310, -319, 0, -1, -1, 1, -3, 1, 1, -1, -3, 0, 1, -1,
         1, -2, -2, 1, 1, -2, 1, -1, 2, -2, -5, 4, -1, -1, 1, -1,
         -2, 1),
        (19, 297, 333, -309, -318, 0, -1, -1, 0, -2, 1, 0, 0, -1, -1, 0, -1,
         2, -1, -1, 0, 0, -1, 3, -1, 0, -2, -3, 3, -1, -1, 1, 0,
         0, 0),
        (20, 295, 330, -310, -318, 1, -1, -1, 0, -1, 0, 1, -1, -2, 1, 2, -2,
         0, 0, 1, -1, -2, 1, 4, -2, 2, -2, -3, 1, -1, 2, 3, -2),
        (21, 293, 327, -310, -319, 2, 0, -2, 0, -1, -1, 2, -1, -1, -1, 3, 0,
         -2, 0, 2, -1, -2, 0, 5, -1, 0, -1, -1, 0, 1, 1, 2, -2),
        (22, 290, 323, -309, -319, 2, -1, -2, 1, 0, -2, 3, 0, 0, -1, 0, 0,
         0, 0, 2, -1, -2, -1, 4, 1, 3, 0, 0, 0, 0, -1),
        (23, 288, 318, -309, -317, 3, -1, -2, -1, 0, 0, 2, -1, 2, 0, -1, -1,
         2, 1, 2, -1, -3, 0, 4, 1, 4, 0),
        (24, 287, 314, -310, -317, 4, -1, -2, -2, 1, 1, 0, -2, 3, 1, -1, 0,
         3, 0, 3, 1, -2, -1, 0, -1),
        (25, 287, 311, -311, -318, 3, -1, 0, -1, -1, 0, 3, -2, 1, 2, 0, -2,
         4, 3, 1, 0, 0, -1),
        (26, 288, 308, -313, -319, 3, -1, 1, 0, 0, -3, 0, 0, 5, 3, -1, 0,
         0, -1, 3, 2),
        (27, 289, 306, -313, -319, 3, -1, 0, -2, 0, 0, 1, -1, 3, 3, 1, 0,
         -1, -1, 6, 3),
        (28, 291, 304, -313, -319, 1, -1, 1, -1, 0, -1, 0, 0, 4, 4, 0, -2,
         1, 2, 2, 0),
        (29, 293, 303, -313, -321, 1, 1, 0, -1, 0, -1, 2, 1, 1, 0, 1, 2,
         3, 2),
        (30, 295, 301, -313, -319, 1, -1, 0, 1, -1, -1, 1, 0, 3, 2, 1, 1,
         2, 2),
        (31, 298, 300, -313, -319, 1, -1, 0, 1, 0, -1, 1, 2, 2, 3, 1, -1,
         1, 3, -1, -1),
        (32, 301, 300, -313, -320, 1, 1, 0, 1, 0, -1, 2, 1, 1, 3, 1, 2,
         0, 1, 1, -2, -1, 2),
        (33, 303, 300, -311, -319, 0, 1, 1, 1, 0, 0, 0, 1, 2, 1, 0, 2,
         1, 4, 0, -5, 0, 2, 0, 2),
        (34, 306, 301, -311, -319, 0, 1, 1, 1, -1, 0, 1, 2, 1, 1, 0, 0,
         0, 1, 0, 0, 0, 0, 0, 2, 0, -1, 1, 2),
        (35, 311, 304, -311, -320, 0, 1, 0, 0, 0, 1, -1, 2, 1, -1, 0, 1,
         -1, 1, 0, 0, 1, 0, -1, 1, 0, 0, 0, 1, 0, 0),
        (36, 314, 305, -310, -318, 0, 0, 0, -1, -1, 2, -1, 1, 1, 0, 0, -1,
         -1, 2, 0, 0, 0, -1, -1, 2, -1, 0, 1, 1, 0, 0),
        (37, 317, 308, -309, -319, 1, -1, -1, 2, -1, 0, 0, 0, -1, 0, 1, -1,
         -1, 1, 0, 0, -2, 2, 0, 2, 1, -2, -1, 0, 0, 2),
        (38, 321, 310, -309, -317, 2, -1, -1, 0, -2, 1, 2, -2, -1, 1, 0, -1,
         -1, 1, -4, 1, 3, 0, -3, 1, 2, -3, -1, 3),
        (39, 323, 313, -307, -318, 1, -1, -1, 0, -1, 1, 2, -3, -1, 1, -1, 0,
         -2, -1, -1, 2, -1, 0, -1, 0, 0, -1),
    ),
    (  # V = 8.0
        (0, 322, 315, -303, -316, 0, -2, 1, 0, -2, 0, 6, -2, -7, 2, -3, -1,
         2, 0, -1, -1),
        (1, 324, 317, -302, -316, -1, -1, 2, -1, 0, 0, 3, -1, -5, -1, -5, 0,
         1, 1, 0, -1),
        (2, 325, 319, -299, -316, -3, 0, 3, -2, -1, 0, 4, -2, -7, 0, -4, 0,
         1, -1),
        (3, 328, 321, -300, -314, -1, -1, 2, -1, -2, -2, 4, 0, -9, -4, 0, 1,
         0, -1, -5, 1),
        (4, 330, 324, -298, -313, -3, -2, 1, 0, -2, -3, 4, 0, -6, -2, -4, -2,
         0, 1, -4, -3, 1, 1, 0, -1, -1, 0),
        (5, 333, 328, -299, -313, -5, -3, 3, -1, -5, -1, 3, -1, -2, -3, -8, -1,
         -2, -2, -3, 0, -1, -2, -2, 0, -2, 0),
        (6, 337, 333, -305, -315, -2, -3, 2, 1, -5, -4, 0, -1, -3, -1, -3, -4,
         -9, -2, -1, -2, -3, 2, 2, -2, -3, 0),
        (7, 340, 338, -310, -317, 0, -3, 1, 0, -5, -3, -1, -2, -5, -2, -2, -3,
         -6, -2, -5, -2, 0, -2, 0, 2),
        (8, 341, 343, -312, -319, 0, -1, 0, -3, -4, -3, -3, -3, -3, -2, -5, -4,
         -4, -2, -3, -2, -2, -1),
        (9, 341, 348, -314, -321, 2, -1, -3, -4, -2, -3, -3, -2, -5, -5, -4, -3,
         -5, -3, -1, -2, -1, 0),
        (10, 339, 352, -313, -321, 0, -2, -1, -3, -3, -4, -4, -3, -4, -6, -5, -4,
         -3, -3, -1, -2, -2, 0),
        (11, 338, 354, -314, -322, 0, 0, -1, -3, -4, -5, -1, -3, -7, -7, -2, -4,
         -4, -4, -1, -2),
        (12, 336, 355, -314, -322, 0, 1, -1, -4, -3, -3, -3, -4, -4, -7, -3, -4,
         -4, -5, 0, -2),
        (13, 333, 356, -316, -323, 2, 1, -2, -2, -1, 0, -3, -6, -2, -5, -4, -7,
         -3, -6, -1, -2, 0, 0),
        (14, 328, 354, -313, -321, -1, 1, -1, -1, -1, 1, -2, -2, -1, -5, -4, -10,
         -1, -2, -1, -8, -1, 2),
        (15, 319, 350, -311, -319, -1, 1, 0, 0, -2, 2, 0, 1, -1, 0, -2, -4,
         0, -5, -2, -8, 1, 3, -1, -6, 1, 4, -1, -2),
        (16, 312, 346, -310, -319, -1, 1, -1, -1, -1, 5, -1, 1, -1, -1, -2, 1,
         0, 1, -2, 0, 0, -4, 0, -2, 0, -10, -2, 6, -1, 2, -2, 6),
        (17, 305, 340, -309, -319, -2, 3, 1, -2, -2, 1, -2, 2, 1, -2, -2, 3,
         -1, 1, 0, -2, -1, -1, -1, -1, 0, -4, -3, 6, -1, -2, -2, -1),
        (18, 301, 336, -310, -320, -1, 2, 0, -1, -1, -1, -1, 0, 0, 0, -1, -1,
         -1, 0, 0, 1, 0, -3, 0, 0, -3, 1, 0, 2, -2, 0, 0, -5),
        (19, 298, 333, -309, -320, -1, 2, 1, -3, -1, 2, -2, -1, 1, 0, 0, -1,
         -1, 0, 1, 0, -2, -2, 0, 2, -1, 0, 0, -1, -2, 2),
        (20, 296, 329, -309, -318, -1, 0, 1, -1, 0, 0, -2, 0, 2, -1, -1, 0,
         0, 1, 0, -3, 0, 1, -3, 1, 2, -1, 0, -1),
        (21, 294, 327, -309, -319, 1, 0, -1, -1, 0, 0, 0, -1, 1, -1, 0, 0,
         -2, 0, 2, 0, 0, -1, -2, 1, 0, -1),
        (22, 292, 323, -309, -318, 1, -1, -1, -1, 1, 0, 0, 0, 2, -1, -1, 0,
         -1, -1, 2, 1, 1, -1, -3, 1, -1, -1),
        (23, 290, 318, -308, -316, -1, -2, 1, 0, 1, 0, 0, -1, 3, 0, -1, 0,
         -2, -2, 4, 0, -2, 1, -1, 0),
        (24, 289, 315, -309, -317, 0, -1, 1, -1, 1, 1, 0, -2, 3, 1, -3, -2,
         2, 0, 4, 2, -3, -1),
        (25, 290, 312, -313, -317, 2, -2, 1, -1, 1, 0, 0, -1, 3, 0, -4, -1,
         5, -1, 1, 1),
        (26, 291, 310, -315, -320, 3, -1, -1, -2, 2, 0, -2, -3, 6, 5, -2, -4,
         2, 1),
        (27, 292, 308, -315, -320, 1, -2, 0, -1, 2, -2, -1, 0, 5, 3, -1, -1),
        (28, 294, 306, -316, -321, 1, 0, -1, -2, 3, 0, -1, -1, 4, 0),
        (29, 296, 305, -316, -322, 0, 0, 1, -1, 0, 0, 3, 0, -1, 0),
        (30, 297, 304, -314, -322, -2, -1, 2, 1, 0, -2, 4, 5, -1, -5),
        (31, 300, 303, -314, -321, -2, -2, 1, -1, 1, 1, 5, 6, -2, -3),
        (32, 303, 304, -315, -323, 0, -1, 1, -1, 0, 2, 2, 5, 1, -1, 1, 4),
        (33, 305, 304, -314, -323, 1, 1, 0, 0, 2, 0, 0, 5, 1, -1, 1, 4,
         0, -1),
        (34, 307, 305, -313, -323, 1, 1, 0, 0, 1, 2, 0, 1, 1, 1, 1, 3,
         0, 0, -1, -2, 0, 1),
        (35, 311, 307, -311, -322, 0, 2, 1, -3, -1, 3, 0, 0, -1, 0, 1, 3,
         0, 0, 0, 0, 0, 0, 0, -1, 0, 0),
        (36, 313, 308, -308, -320, -2, -1, 1, 0, -1, 1, 0, 1, 0, -1, 0, 2,
         -1, 2, 0, -2, 1, -1, -1, 1, 0, 0),
        (37, 315, 310, -306, -320, 0, 0, -1, -1, -1, 2, 0, -2, 0, 2, 0, -1,
         -3, 3, 2, -2, 0, 0, -2, 0, 1, 0),
        (38, 318, 312, -305, -319, 0, 0, 0, -1, -1, 1, 1, -2, -2, 2, -2, 0,
         0, 0, 0, -1, 0, 0, -1, 1),
        (39, 320, 314, -304, -319, 0, 0, 0, -1, -1, 1, 2, -2, -3, 1, -2, 0,
         0, -1, -1, 1, 0, 0),
    ),
    (  # V = 9.0
        (0, 321, 316, -302, -318, 0, 0, -2, 0, 1, -2, 2, 0, -3, 0),
        (1, 322, 317, -299, -316, -1, -1, -5, 0, 5, -2, 1, 0, -4, -1),
        (2, 324, 319, -298, -315, -3, -1, -1, -3, 1, 0, 3, -1),
        (3, 326, 321, -297, -314, -3, 0, 0, -4, -2, -1, 2, -2, -3, 0),
        (4, 328, 323, -296, -311, -4, -3, 0, -3, -3, 0, -1, -1, 1, -2, -5, 1),
        (5, 332, 327, -300, -312, -3, -2, 0, -3, -5, -2, -1, -1, 0, 0, -2, -2,
         -2, -1),
        (6, 335, 333, -303, -315, -4, -3, -1, -2, -1, -2, -4, -1, -1, -2, -2, 0,
         -4, -3, 1, 0, -7, -1, 0, -1, -1, -1),
        (7, 338, 338, -308, -317, -3, -4, 0, 0, -2, -3, -4, -3, -3, -1, -1, -2,
         -3, 0, -2, -2, -4, -2, 0, 1, 0, -1),
        (8, 339, 343, -310, -319, -3, -3, 0, -2, -2, -2, -5, -5, -2, -1, -2, -3,
         -4, -1, -1, -1, -2, -1, 0, 0),
        (9, 339, 347, -312, -320, -2, -4, -1, -1, -2, -4, -2, -2, -4, -4, -3, -1,
         -5, -4, -1, -2, 1, 1, -2, -1),
        (10, 338, 350, -314, -320, 0, -3, -2, -2, -2, -4, -2, -2, -4, -4, -3, -4,
         -4, -4, -2, -3, 1, 2, 0, 1),
        (11, 337, 353, -315, -323, 0, -1, -1, -2, -3, -4, -1, -2, -4, -5, -3, -5,
         -4, -2, -1, -5, 0, 1),
        (12, 335, 354, -314, -323, -1, 0, 0, -2, -4, -5, -1, -1, -3, -5, -3, -5,
         -3, -4, -3, -4, 2, 2),
        (13, 332, 354, -314, -321, -1, -2, -1, 0, -2, -4, 0, 0, -4, -6, -2, -7,
         -2, -1, -3, -8, 1, 3),
        (14, 328, 353, -312, -320, -3, -1, 0, 0, -2, -3, -1, 0, -2, -4, -1, -4,
         -2, -5, -2, -6, 0, 0),
        (15, 320, 350, -313, -321, 1, 3, -2, -1, 0, 1, -1, -2, -2, 0, 0, 1,
         -1, -4, -1, -5, 0, 2, -3, -5, 2, 6, 0, 0),
        (16, 312, 345, -310, -319, -1, 4, 0, -5, -1, 5, -2, -3, 0, 3, -2, 1,
         -1, 0, 0, -4, -1, -2, -2, 1, 1, 2, -2, -2),
        (17, 306, 340, -310, -319, -1, 3, -1, -4, 0, 3, 0, -2, -2, 3, 0, 0,
         -2, 4, -1, -1, -1, -3, 1, -1, -2, -3, -1, 4),
        (18, 302, 336, -311, -320, -1, 2, 1, -3, -1, 0, -1, 1, 0, -2, -2, 2,
         -2, -1, 1, -2, -1, 0, 0, -1, 2, -2, -1, 0),
        (19, 299, 332, -310, -318, -1, 1, 1, -2, 1, -1, -3, 1, 0, -2, 0, 2,
         -2, 0, 1, -3, 1, 1, -1, -1),
        (20, 297, 329, -310, -318, -1, 0, 1, 0, 2, -3, -2, 2, -3, -2, 2, 0,
         -1, 1, 2, -3, -1, 2, 0, -2),
        (21, 295, 327, -309, -319, -2, 0, 2, 0, 1, -2, -3, 1, 2, -1, 0, 0,
         -2, 0, 4, -2, -2, 1),
        (22, 293, 323, -309, -317, -1, -1, 1, -1, 2, -1, -4, 0, 2, -1, 0, 0,
         0, -1, 2, 0),
        (23, 291, 319, -309, -317, -1, -1, 1, 0, 4, -1, -5, 0, 3, 0, -1, 0,
         3, -1),
        (24, 291, 316, -312, -318, 1, 0, 2, 0, 0, -2, 0, 2, 2, -1, -2, 0,
         3, -1),
        (25, 291, 313, -314, -319, 2, 1, 2, -1, 2, 0, -1, 0, 1, 0, -1, -1),
        (26, 292, 310, -316, -319, 2, -2, 4, 2, 0, 0, -1, -3, 3, 3, -2, -1),
        (27, 294, 309, -319, -322, 3, 2, 3, -1, 2, 1, 0, 1),
        (28, 295, 308, -319, -324, 3, 2, 4, 1, 0, -2),
        (29, 298, 306, -320, -323, 2, 0, 3, 2, 2, 1),
        (30, 299, 306, -317, -325, -1, 0, 4, 3, 0, -1),
        (31, 302, 305, -318, -325, 1, 1, 1, -2, 4, 3),
        (32, 304, 305, -317, -325, 0, 1, 2, -2, 0, 2),
        (33, 305, 305, -314, -323, 1, -1, 0, 0, 1, 0),
        (34, 307, 306, -314, -325, 3, 3, 0, -2, -2, 0, 4, 4, -1, 1),
        (35, 311, 308, -310, -323, -1, 1, -1, -3, 0, 2, -1, 1, 0, 1, 1, 1),
        (36, 313, 309, -308, -321, -1, 0, 0, -3, 0, 2, 0, 2, -2, 0, 1, 0),
        (37, 315, 311, -307, -321, 1, 0, -1, -1, 1, 2, -2, -1, 1, 0, -1, 2),
        (38, 317, 313, -304, -320, 0, 0, -1, 0, 1, -1, -1, 0, -3, 1, 2, 1),
        (39, 319, 314, -303, -318, 0, -1, -3, 0, 5, 0, -3, -1, -2, 1),
    ),
    (  # V = 10.0
        (0, 322, 316, -302, -317, -1, 0, -2, -2),
        (1, 324, 318, -303, -318, 0, 0, -2, 0),
        (2, 326, 320, -304, -318, 2, 1, -4, -2),
        (3, 329, 322, -304, -315, 1, -2, -4, -2),
        (4, 332, 326, -305, -316, 0, -2, -2, -3),
        (5, 334, 329, -306, -316, -1, -1, -1, -3),
        (6, 336, 333, -308, -316, -1, -2, -2, -2, -1, -3),
        (7, 337, 338, -308, -319, -4, -1, -1, -2, 0, -2, -8, -3),
        (8, 338, 343, -310, -319, -5, -6, 0, -1, 0, 1, -6, -7, -2, 0, 1, 0),
        (9, 337, 347, -311, -321, -4, -4, 0, -4, -1, 0, -3, -3, -1, -1, -4, -4,
         -2, -3, -2, 2, -2, -5),
        (10, 336, 348, -312, -319, -3, -4, -2, -2, -1, -2, -1, -2, -2, -3, -3, -3,
         -2, -5, -4, -2, 0, 0),
        (11, 335, 351, -313, -322, -3, -2, 0, -2, -2, -3, -2, -3, 0, 0, -4, -6,
         -2, -3, -4, -4, 0, 1),
        (12, 334, 352, -313, -322, -5, -3, 3, 1, -4, -5, 0, -2, -2, 0, -4, -8,
         -1, -1, -3, -5, 0, 0),
        (13, 332, 354, -316, -324, 1, -1, -2, 0, -2, -5, 0, 2, -3, -4, -2, -7,
         0, 2, -4, -11, 0, 2),
        (14, 328, 354, -313, -324, -2, 0, 1, 2, -4, -8, 1, 3, -4, -6, 0, -1,
         -2, 2, -2, -10, 0, -4),
        (15, 320, 351, -313, -324, 0, 5, 1, -3, -3, 2, -1, -8, -1, 2, 0, 2,
         0, -1, -2, -5, -2, -5),
        (16, 312, 346, -310, -322, -2, 6, 0, -7, 0, 8, 0, -11, -1, 6, -2, 1,
         0, 2, -1, -5, 0, -4),
        (17, 306, 342, -309, -323, -2, 5, 0, -5, -2, 4, 3, -6, -2, 6, 0, 0,
         -2, 4, 0, -1, 2, -6),
        (18, 301, 337, -309, -321, -2, 0, 1, -1, 0, -1, 0, 0, -2, 0, 1, 0,
         -3, 3),
        (19, 298, 333, -308, -320, -1, 1, 0, 0, 1, -3, 0, 1, -1, 0, 0, -1),
        (20, 296, 331, -308, -321, -1, 0, 0, 0, 3, -2, -3, 1, 1, 0),
        (21, 294, 327, -308, -319, -1, 0, 1, -1, 4, 0, -4, -2, 0, 1),
        (22, 293, 323, -309, -316, 1, -2, -1, 0, 3, -3, 0, 1, -4, 0),
        (23, 293, 318, -313, -316, 3, -1, -1, 0, 4, -1, -1, 0),
        (24, 293, 315, -316, -317, 4, 0, 2, 1, 2, -1, -1, -1),
        (25, 293, 313, -316, -318, 2, 1, 4, -1, 0, -1),
        (26, 294, 312, -320, -322, 6, 4, 2, -2),
        (27, 295, 310, -321, -322, 6, 1),
        (28, 296, 309, -320, -324, 3, 1),
        (29, 298, 307, -318, -324, 2, 1),
        (30, 299, 307, -316, -326, 0, 1),
        (31, 302, 307, -318, -328, 3, 3),
        (32, 303, 307, -315, -328, 1, 3),
        (33, 305, 307, -314, -326, 2, 1),
        (34, 307, 307, -312, -325, 1, 3, 0, -1),
        (35, 310, 308, -309, -322, -1, 0, 0, 0),
        (36, 313, 309, -309, -321, 0, -1, 1, 2, -3, 2),
        (37, 315, 311, -307, -321, 1, 0, -2, 1, -2, 2),
        (38, 318, 313, -304, -319, -1, -1, -3, 0, -2, 2),
        (39, 320, 314, -305, -318, 1, -1, -2, 1),
    ),
)
