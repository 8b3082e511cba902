# -*- coding: utf-8 -*-
"""
Tint: Weaving the mathematics of colour appearance
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Munsell Renotation Source Tables
================================
Chromaticity samples of the Munsell renotation data under illuminant C,
stored as second-order differences to keep the module compact.

Layout:
    ``MUNSELL_SOURCE[vi]`` holds the rows for value level ``MUNSELL_VALUES[vi]``.
    Each row is ``[hue_index, dx1, dy1, dx2, dy2, ...]`` where ``hue_index``
    counts 2.5 hue steps from 0 (10RP) and the pairs encode the (x, y)
    chromaticity of chroma 2, 4, 6, ... in units of 1/1000 after integrating
    the sequence twice.

These tables are decoded once by ``tint_munsell.build_munsell_table``.
"""

from typing import Final

MUNSELL_VALUES: Final[tuple[float, ...]] = (1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0)

MUNSELL_SOURCE: Final[tuple[tuple[tuple[int, ...], ...], ...]] = (
    (
        (0,363,271,-334,-300,-6,4,-2,0,-5,4,-1,1),
        (1,377,282,-337,-307,-5,1,-6,1,-4,3),
        (2,391,293,-340,-313,-4,-1,-8,-1,-7,2),
        (3,402,303,-338,-317,-6,-5,-10,-2,-9,1),
        (4,413,315,-333,-323,-15,-7,-5,-6,-12,0),
        (5,426,334,-321,-331,-31,-13,-7,-11),
        (6,438,358,-310,-336),
        (7,443,378),
        (8,445,398),
        (9,436,418),
        (10,423,427),
        (11,404,429),
        (12,380,421),
        (13,354,409),
        (14,336,398,-295,-202),
        (15,315,384,-317,-230),
        (16,301,372,-330,-254,-20,31),
        (17,291,363,-337,-277,-28,27,-35,15),
        (18,283,356,-337,-290,-28,12,-9,-7),
        (19,276,348,-336,-299,-22,5,1,-11),
        (20,269,341,-334,-310,-14,-1,5,-16),
        (21,260,329,-332,-317,1,-8,2,-3),
        (22,250,314,-325,-326,9,-4),
        (23,243,302,-316,-327,9,-3),
        (24,236,288,-306,-326,11,1),
        (25,232,278,-299,-324,14,5),
        (26,229,268,-291,-319,16,9),
        (27,229,258,-286,-311,15,12,9,5),
        (28,231,249,-284,-301,14,11,8,7),
        (29,236,242,-282,-293,10,9,9,9),
        (30,243,237,-285,-287,9,8,10,9,7,8),
        (31,255,231,-287,-280,9,9,10,12,6,9,3,4,2,4,0,0,1,5,0,-1,1,2,-1,0,1,1,0,0,-1,0,1,1,0,1,0,0,0,0),
        (32,268,228,-290,-273,5,9,7,12,3,4,2,4,2,4,0,1,1,3,1,1,0,2,-1,-1,1,1,1,0,-1,1),
        (33,281,230,-295,-273,4,12,3,5,1,7,1,2,2,4,0,2,1,3,1,0,-1,1,1,2,-1,-1),
        (34,294,233,-303,-273,3,10,1,5,1,5,1,3,1,2,0,4,0,3,1,0,0,0),
        (35,303,236,-307,-275,1,10,0,4,1,5,-1,3,2,1,-1,5,1,3,0,0),
        (36,313,240,-313,-277,0,8,-2,3,1,6,0,3,0,1,1,5,-1,2),
        (37,324,246,-319,-282,-2,7,-1,3,-1,6,0,3,0,1,-1,4),
        (38,338,254,-326,-288,-3,6,-2,2,0,6,-3,2,0,4),
        (39,350,262,-329,-294,-5,6,-2,1,-2,4,-1,3),
    ),
    (
        (0,353,296,-321,-314,-3,1,0,-2,-4,1,-2,0,-1,1),
        (1,361,303,-320,-316,-4,-1,2,-3,-5,1,-2,-2,-3,1),
        (2,369,311,-320,-319,-3,-2,4,-3,-8,-4,-5,1,0,-2),
        (3,375,318,-316,-319,-5,-4,1,-4,-3,-7,-8,-1,-4,-1),
        (4,381,327,-314,-321,-6,-6,1,-7,-8,-7,-6,-4,-4,-3),
        (5,385,337,-310,-323,-7,-7,4,-6),
        (6,388,348,-309,-322,-3,-7),
        (7,389,359,-309,-322,-1,-6),
        (8,387,369,-306,-321),
        (9,383,379,-303,-319),
        (10,376,384,-298,-311),
        (11,366,386,-292,-300),
        (12,356,385,-293,-291),
        (13,342,380,-296,-285),
        (14,331,374,-304,-283,-1,19),
        (15,317,365,-309,-284,-7,11,-11,21),
        (16,307,358,-315,-292,-6,7,-8,14,-10,10,-8,2),
        (17,298,351,-320,-302,-5,3,-3,0,-12,14,-4,-5,-3,-6,0,-5),
        (18,292,345,-320,-305,-4,-2,-2,-3,-8,5,-2,-2,1,-5,2,-3),
        (19,287,340,-320,-309,-1,-4,-2,-1,-4,1,-2,-2,3,-4,4,-3),
        (20,282,334,-320,-312,3,-4,-3,-1,-1,-2,0,-3,6,-3,2,-3),
        (21,277,327,-320,-316,6,-4,-4,0,4,-4,3,0,5,-2),
        (22,270,318,-317,-321,8,-1,-4,-3,7,-1,8,0),
        (23,265,310,-314,-322,8,-1,-1,-1,8,1,7,3),
        (24,261,301,-312,-323,8,0,2,-2,8,4),
        (25,258,294,-310,-323,8,0,5,1,7,3),
        (26,256,287,-307,-322,8,-1,6,3,9,6),
        (27,255,280,-304,-320,9,3,5,3,9,7),
        (28,256,273,-302,-315,8,5,6,3,8,9),
        (29,259,268,-300,-311,6,4,6,6,8,8,5,5),
        (30,264,262,-302,-305,6,5,7,6,6,7,5,6,3,1),
        (31,271,258,-300,-301,6,7,5,7,5,5,6,7,2,4,2,1,0,2,2,3,-1,-1,1,3,0,0,1,1,-1,0,1,0,-1,1,1,0,-1,0),
        (32,280,257,-300,-298,4,9,1,3,6,7,3,6,1,2,1,2,1,2,1,1,0,1,0,2,1,0,0,1,0,0,0,1,0,0),
        (33,289,258,-302,-295,3,8,1,1,2,6,2,5,1,2,0,3,2,1,-1,2,1,1,0,0,0,2,1,-1,-1,1),
        (34,298,261,-305,-296,1,8,0,-1,2,7,0,3,1,2,0,5,1,0,0,1,1,1,-1,1,1,0,0,2),
        (35,307,265,-309,-298,0,7,-1,-2,1,7,0,3,0,3,0,2,1,2,0,1,0,0,0,2),
        (36,316,269,-313,-299,-1,4,-1,-1,0,7,-1,2,1,2,-1,2,-1,2,1,2,0,0),
        (37,328,275,-318,-300,-1,1,0,-2,-3,6,-1,2,-1,1,0,3,-1,2,-1,1),
        (38,338,283,-320,-306,-3,1,0,-2,-4,4,0,2,-1,2,-1,1,-2,4),
        (39,346,289,-322,-310,-2,2,0,-2,-4,1,-2,2,-2,2,-2,2),
    ),
    (
        (0,353,307,-317,-317,-3,-1,0,-1,-3,0,-1,-1,-5,1,1,-1),
        (1,359,313,-316,-318,-4,-2,2,-2,-4,-2,-2,-1,-6,1,0,-1),
        (2,365,319,-315,-319,-6,-2,3,-4,-3,-3,-6,-3,-6,1,0,-2),
        (3,369,325,-314,-320,-5,-3,1,-4,-3,-4,-5,-5,-10,-1,0,-2),
        (4,373,331,-315,-321,-4,-4,0,-5,-6,-5,-3,-4,-7,-3),
        (5,376,339,-316,-322,-1,-4,-6,-5,-7,-3),
        (6,377,348,-316,-324,-2,-5,-10,-6),
        (7,377,355,-316,-323,-6,-7,-9,-6),
        (8,375,363,-316,-324,-6,-8,-9,-8),
        (9,370,370,-312,-323,-8,-11),
        (10,365,375,-311,-322,-6,-10),
        (11,359,378,-309,-318,-6,-9),
        (12,351,379,-306,-313,-6,-8),
        (13,341,377,-305,-306,-6,-8),
        (14,332,373,-309,-303,-3,-2,-3,4),
        (15,318,364,-309,-299,-3,3,-5,5,-8,2),
        (16,309,358,-313,-304,-2,6,-4,4,-7,3,-2,0,-6,5),
        (17,300,350,-316,-308,-4,0,0,-1,-7,5,0,-3,0,-2,-2,-4,0,-2,-4,1,0,-2),
        (18,294,344,-317,-310,-1,-2,0,-4,-5,2,1,-3,0,-2,2,-4,2,-1,-2,-1,-2,2),
        (19,289,339,-316,-311,0,-5,1,-3,-3,1,1,-1,2,-4,2,-1,2,-2,-1,0,-1,0),
        (20,284,334,-315,-314,2,-4,2,-2,-1,-1,0,0,3,-4,2,0,2,-3,2,-1,-1,0),
        (21,280,327,-316,-315,5,-4,3,-2,-2,-1,4,-1,2,-1,3,-1,2,-1,2,1),
        (22,274,319,-314,-318,8,-2,0,-2,3,-1,4,-1,3,1,2,-1,4,1),
        (23,270,312,-313,-320,9,0,3,-1,2,0,5,2,2,-1,4,1),
        (24,266,305,-310,-321,8,-1,5,2,1,-1,7,3,1,0),
        (25,264,298,-310,-321,11,2,3,0,3,1,6,3),
        (26,262,292,-306,-321,10,4,3,-1,4,2,5,4),
        (27,262,286,-304,-318,10,4,2,1,6,4,3,1),
        (28,263,280,-301,-313,6,3,5,4,4,3,3,1,4,5),
        (29,266,276,-301,-311,6,4,5,4,4,4,2,3,3,2),
        (30,271,272,-303,-308,5,5,6,6,2,1,3,4,3,2,2,2,2,4),
        (31,278,269,-304,-306,5,6,5,6,2,3,3,3,3,3,3,2,1,4,1,2,1,-1,0,2,0,2,1,0,0,0,0,0,1,2),
        (32,285,267,-304,-302,4,6,3,5,1,2,4,6,0,0,2,3,2,3,0,1,0,1,1,0,0,2,1,0,0,1,0,-1,0,2),
        (33,292,268,-305,-302,3,7,3,5,0,1,2,5,0,1,1,2,1,2,0,2,1,0,0,1,0,2,0,-1,0,1,1,1,0,0),
        (34,300,270,-307,-301,1,6,1,2,0,3,2,3,0,3,0,1,1,2,0,2,0,0,0,0,1,2,0,0,0,1,0,0),
        (35,309,274,-311,-303,1,5,-1,1,0,4,0,2,1,3,0,2,0,0,0,3,0,0,0,0,1,1,-1,0,0,2),
        (36,317,279,-313,-306,-1,4,0,2,-1,2,-1,2,0,2,0,4,0,-2,-1,4,1,0,-1,0,0,1),
        (37,327,286,-314,-310,-3,5,0,-1,-2,2,-1,3,0,1,-1,1,-1,1,-1,2,1,-1),
        (38,337,294,-315,-314,-4,3,-2,0,-2,1,-1,1,-2,0,0,2,-3,2,0,0),
        (39,345,300,-316,-315,-4,1,-1,-1,-2,1,-2,-1,-2,2,-2,0,-2,1),
    ),
    (
        (0,342,311,-312,-318,-2,0,0,-1,-3,0,1,-1,-3,-1,-2,1,3,-2,-4,1),
        (1,346,315,-311,-317,-2,-2,0,-2,-3,0,0,-1,0,-2,-5,0,3,-1),
        (2,351,320,-310,-318,-3,-1,1,-3,-4,-1,0,-2,-1,-2,-3,-1,-2,-2),
        (3,354,324,-309,-318,-2,-2,0,-2,-4,-3,-3,-2,0,-2,-6,-3,-2,-1,-1,-2),
        (4,358,329,-308,-317,-4,-3,0,-3,-4,-4,-4,-1,-3,-3,-9,-2),
        (5,362,337,-310,-320,-5,-4,-1,-2,-5,-3,-8,-3),
        (6,365,344,-311,-320,-8,-6,-4,-5,-6,-2,-6,-4),
        (7,366,350,-311,-319,-10,-9,-7,-5,-6,-3),
        (8,366,359,-313,-323,-10,-10,-8,-6,-7,-4),
        (9,363,365,-312,-322,-11,-12,-7,-7,-8,-7),
        (10,359,370,-311,-321,-10,-13,-8,-10),
        (11,354,373,-310,-319,-9,-12,-8,-12),
        (12,348,373,-309,-314,-7,-11,-8,-13),
        (13,338,371,-305,-309,-7,-9,-6,-9),
        (14,331,368,-308,-308,-5,-3,-3,-4,-4,-6),
        (15,319,360,-310,-304,-1,2,-4,3,-4,-5,-5,0),
        (16,311,355,-312,-308,-2,6,-3,1,-4,4,-5,3,-2,-3,0,-8),
        (17,301,347,-313,-312,-3,5,-3,-2,-2,3,-3,1,1,-7,-1,-2,0,-1,1,-4,0,-1,-3,0,2,-2),
        (18,296,342,-314,-314,-2,1,-2,-1,-2,-2,-4,2,7,-8,-2,0,2,-1,4,-5,-1,0,-5,4,3,-3),
        (19,292,337,-314,-314,-1,-1,-1,-2,0,0,-4,0,7,-6,0,0,1,0,4,-4,0,0,-3,1,0,0),
        (20,288,333,-313,-316,-1,-1,1,-2,1,-1,-4,1,8,-4,1,-2,-1,0,4,-2,1,-1,0,0,0,1),
        (21,284,327,-313,-316,2,-3,0,0,0,-2,2,-1,4,-1,3,-1,0,0,3,-1,2,0,0,-1),
        (22,280,321,-312,-319,2,-1,1,-2,2,0,3,-1,3,-1,3,0,2,0,1,0),
        (23,276,315,-309,-319,1,-2,3,0,1,-2,4,1,3,0,4,2,2,0),
        (24,274,309,-310,-320,5,-1,0,-1,3,0,5,1,1,2,8,2),
        (25,273,304,-310,-321,6,1,0,-3,3,2,7,3,-1,-1,9,6),
        (26,272,299,-308,-320,6,0,0,-1,5,2,4,1,1,2),
        (27,273,295,-307,-320,5,2,1,-1,6,4,1,1,2,1),
        (28,275,291,-307,-317,5,2,0,-1,6,4,2,2,1,1,3,2),
        (29,278,288,-307,-316,4,2,1,1,5,5,1,1,2,0,3,3,1,2),
        (30,282,284,-308,-312,3,2,0,1,6,4,1,3,2,0,1,2,2,1,1,1),
        (31,286,282,-306,-311,1,3,2,1,3,4,2,3,2,2,2,1,2,2,0,0,3,5,0,0,1,1),
        (32,291,280,-306,-308,1,2,2,4,1,2,2,2,1,2,3,3,0,2,1,-1,1,4,0,1,0,-2,1,3,0,0),
        (33,296,281,-306,-309,0,5,3,2,0,2,1,2,1,3,1,0,0,2,0,1,2,3,0,0,-1,0,1,1,1,1,-1,-2),
        (34,302,283,-308,-309,0,4,2,2,-1,2,2,2,0,1,0,1,0,3,1,0,0,3,1,-1,-1,1,0,0,1,2,-1,-2),
        (35,309,286,-310,-310,1,4,-1,1,0,2,0,2,0,0,0,1,0,2,0,2,0,1,0,1,1,-1,-1,1,0,0,0,1),
        (36,316,290,-311,-311,-1,1,-1,3,0,1,-1,1,0,2,0,1,0,-1,-1,0,0,5,0,0,0,-1,-1,1,1,-1),
        (37,323,295,-312,-313,-1,1,-1,1,-1,2,-1,0,0,2,-1,0,0,0,0,0,-2,3,0,0,0,2),
        (38,331,301,-313,-315,0,0,-2,1,-3,2,1,-2,-1,2,-2,0,1,-1,-1,1,-2,2),
        (39,337,306,-313,-316,0,0,-2,-1,-3,1,0,-1,-1,1,-1,-1,0,0,-1,-1),
    ),
    (
        (0,333,313,-307,-317,0,-1,0,-1,-4,0,3,-2,-6,2,3,-2,-2,0,1,0),
        (1,336,316,-306,-317,0,-1,-1,-1,-1,-1,1,-2,-6,1,2,-2,-1,-1,0,0),
        (2,339,319,-304,-316,-1,-1,-1,-2,1,-1,-2,-3,-5,1,3,-3,-2,0,-6,-1),
        (3,343,323,-305,-317,-1,0,1,-2,-1,-3,-2,-2,-4,-1,0,-2,-5,-1,-3,-1),
        (4,347,328,-306,-316,1,-2,-1,-2,-1,-3,-3,-2,-8,-3,-2,0,-1,-2),
        (5,351,334,-309,-319,2,0,-1,-3,-5,-4,-8,-1,-5,-3,-5,0),
        (6,353,340,-309,-319,1,-1,-4,-5,-8,-5,-7,-2,-4,-2),
        (7,354,345,-309,-319,0,-2,-7,-5,-9,-5,-6,-4,-6,-3),
        (8,355,351,-310,-318,-2,-4,-9,-8,-9,-6,-6,-4),
        (9,353,357,-309,-319,-3,-4,-10,-11,-9,-7,-5,-3),
        (10,350,362,-308,-318,-4,-6,-10,-13,-8,-6,-5,-5),
        (11,347,364,-309,-316,-3,-5,-10,-13,-7,-9,-4,-6),
        (12,342,365,-308,-314,-3,-5,-7,-11,-8,-11,-4,-6),
        (13,335,364,-308,-314,-1,1,-5,-9,-8,-12,-2,-7),
        (14,329,361,-310,-312,-1,2,-2,-3,-5,-8,-3,-9),
        (15,319,356,-311,-313,0,6,-2,1,-2,1,-4,-5,-2,-7),
        (16,311,351,-311,-314,0,5,-3,4,-2,2,-4,3,-1,-5,-4,3,-1,-1),
        (17,303,345,-312,-316,-1,2,-3,2,-1,0,-4,3,0,-2,-2,1,-3,-1,3,-5,0,-1,1,-3,-1,-1,0,-1),
        (18,298,339,-312,-315,-1,-1,-3,2,0,-3,-5,3,4,-6,-2,2,0,-2,4,-4,-1,-1,-1,3,2,-4,0,1),
        (19,295,336,-312,-317,-1,-2,-2,3,0,-4,-4,3,6,-4,-3,-1,1,1,4,-4,0,0,-1,0,2,-2,1,0),
        (20,291,331,-311,-316,1,-2,-3,1,2,-2,-5,2,7,-4,-2,0,1,0,3,-3,0,0,1,-1,3,-1,0,0),
        (21,288,327,-310,-317,1,-2,-3,1,1,-2,-1,-1,6,-2,-3,0,3,0,2,-2,1,0,3,0),
        (22,284,321,-309,-317,2,-2,-3,-1,1,-1,1,0,8,0,-5,-2,2,0,4,1,3,-1),
        (23,281,316,-307,-317,0,-1,0,-3,1,0,1,0,6,0,-1,0,0,0),
        (24,280,311,-309,-318,1,-2,2,0,1,-1,2,0,5,2,-2,-1),
        (25,279,307,-309,-319,2,-1,2,0,1,-1,1,0,6,2,-1,0),
        (26,279,303,-309,-318,3,-3,1,0,3,1,1,-1,3,3,0,-1),
        (27,280,300,-309,-319,3,-1,2,1,2,0,1,0,3,3,1,-1),
        (28,282,297,-309,-318,2,0,2,0,2,2,2,0,1,3,2,-1,3,5),
        (29,285,294,-310,-316,2,-1,2,2,2,1,1,1,3,3,1,-1,0,2),
        (30,288,292,-310,-315,1,-1,2,3,1,1,2,2,1,1,2,0,1,2),
        (31,292,291,-310,-315,0,-1,4,3,1,4,0,-1,1,2,3,2,0,1,2,1),
        (32,296,291,-310,-316,1,0,1,5,3,2,-1,1,2,1,0,2,3,2,0,1,1,1),
        (33,300,291,-310,-315,1,1,1,3,2,4,0,-1,1,3,1,1,0,2,0,0,0,1,1,0,1,2),
        (34,305,293,-311,-316,0,2,2,2,0,3,0,0,1,3,-1,0,2,1,-1,2,1,0,0,0,1,2,-1,0),
        (35,310,296,-310,-317,-1,2,1,1,-1,3,0,0,1,2,-1,1,0,0,0,2,1,-1,-1,3,0,-1,1,1,-1,0),
        (36,315,299,-310,-317,-1,0,0,1,-1,4,0,-1,-1,2,0,0,0,1,0,1,0,0,-1,2,1,-2,-1,3,0,-1),
        (37,320,302,-310,-317,0,0,-1,0,-2,3,1,0,-2,0,0,2,0,0,-1,0,0,0,0,3,-1,-2),
        (38,326,307,-310,-319,1,1,-1,0,-3,1,1,-1,-2,2,0,-1,-1,1,0,0,-1,1,0,-1),
        (39,330,310,-308,-318,-1,0,-1,-1,-2,1,1,-1,-4,1,2,-1,-3,0,2,0,-4,1),
    ),
    (
        (0,329,314,-307,-317,1,-1,-4,1,3,-2,-1,0,-2,-1,4,-1,-5,1),
        (1,332,317,-307,-318,1,1,-2,-2,1,0,0,-2,-3,0,3,-2,-3,1),
        (2,334,319,-305,-316,0,-1,-2,-1,2,-1,-1,-2,-2,0,2,-1,-3,-1),
        (3,338,323,-307,-317,0,-1,1,-1,2,-1,-4,-1,1,-2,-2,-1,-2,-1),
        (4,342,327,-307,-316,-2,-2,2,-1,1,-1,-2,-2,-2,-2,-5,-2,0,0),
        (5,345,332,-309,-317,1,-2,-2,-2,1,-1,-3,-2,-6,-2,-6,-2,-3,-1),
        (6,347,337,-310,-318,2,0,-3,-4,-3,-3,-5,-2,-6,-3,-4,-2,-6,-2),
        (7,349,342,-312,-319,1,0,-2,-5,-6,-2,-5,-5,-8,-3,-2,-1),
        (8,349,348,-312,-319,1,-3,-5,-4,-6,-5,-6,-5,-6,-4),
        (9,348,354,-312,-321,0,-2,-4,-7,-8,-5,-7,-7,-4,-2),
        (10,346,358,-313,-320,2,-3,-6,-7,-8,-8,-7,-7,-1,-1),
        (11,343,360,-311,-320,-1,0,-5,-8,-7,-10,-6,-7,-2,-2),
        (12,340,361,-312,-319,0,0,-4,-6,-7,-10,-5,-9,-2,-2),
        (13,334,361,-311,-318,0,0,-2,-1,-6,-12,-4,-8,-3,-4),
        (14,329,359,-312,-317,-1,1,-1,1,-3,-6,-3,-8,-3,-7),
        (15,319,355,-310,-318,-2,3,0,5,-3,-2,-1,-3,-2,-1,-1,-10),
        (16,311,350,-310,-318,0,4,-2,2,-2,1,-2,2,-3,3,-1,-4,-2,2,0,-4),
        (17,304,344,-311,-318,-1,0,-1,2,-2,1,-1,-1,-2,4,-1,-2,-3,1,0,-1,0,-2,-2,1,0,-3,1,-1),
        (18,299,338,-311,-316,0,-2,-2,-1,0,0,-4,2,2,-3,-1,0,0,-1,-1,0,0,-1,0,0,1,-1,0,-1),
        (19,296,334,-311,-316,0,-3,0,1,-1,-1,-2,1,1,-2,0,-1,-1,1,2,-1,0,-1,-1,-1,2,0,0,0),
        (20,293,330,-311,-316,2,-2,-1,0,0,0,-2,-1,3,0,-2,-2,1,1,0,-1,2,-1,-1,0,3,-2),
        (21,290,327,-310,-317,3,-2,-3,-1,2,-1,-2,1,3,-2,-1,0,1,-1,1,0,1,-1),
        (22,287,322,-309,-318,1,-1,1,-1,0,0,0,-1,2,-1,1,1,1,-1,0,-1),
        (23,285,317,-310,-317,3,-1,1,-1,0,-1,1,0,3,0,-1,0,2,-1),
        (24,284,313,-310,-318,2,-1,2,-1,1,0,0,-1,3,1,0,-1,2,1),
        (25,284,310,-311,-319,1,-2,3,0,3,0,-2,-1,4,2,-1,-1),
        (26,284,306,-310,-318,0,-3,3,0,2,0,2,0,0,0,0,1),
        (27,285,304,-310,-320,0,-1,3,0,2,0,0,0,3,1,-1,0),
        (28,287,301,-310,-318,-1,-2,3,1,2,1,-1,-2,3,3,-1,-1),
        (29,290,299,-312,-318,1,-1,1,1,3,1,-2,-1,3,2),
        (30,292,298,-311,-318,-1,-2,3,3,1,1,-1,-1,1,1),
        (31,296,296,-312,-317,0,-1,3,4,0,0,-1,-1,2,1),
        (32,299,296,-312,-317,1,-1,2,4,0,1,0,-1,1,2,1,-1),
        (33,302,296,-311,-316,0,-1,2,3,0,1,2,2,-1,1,2,0,-1,3),
        (34,305,297,-310,-316,0,0,1,2,-1,1,2,2,-1,0,1,1,0,2,0,-1),
        (35,311,299,-311,-315,-1,-2,1,3,-1,0,1,2,-1,1,1,0,0,1,-1,-1,0,1,1,2),
        (36,315,302,-312,-317,2,0,-2,1,0,1,0,1,0,-1,-1,3,0,0,0,-2,0,3,-1,0,1,-1),
        (37,319,305,-311,-317,1,-1,-1,2,-1,0,0,-1,0,2,0,-1,-2,2,1,-1,-1,2,0,-1),
        (38,323,309,-309,-318,1,-1,-2,2,-1,0,1,-1,-1,-1,0,2,-1,-1,1,-1,-4,4),
        (39,326,311,-308,-316,2,-2,-5,1,2,-1,0,-1,-1,1,0,-2,-3,2,3,-2),
    ),
    (
        (0,326,315,-307,-317,1,-1,0,0,-1,-1,3,-1,-2,0,-1,0),
        (1,328,317,-306,-317,1,0,0,-1,-1,-1,4,0,-4,-2,1,0),
        (2,331,319,-307,-316,2,-1,0,0,-1,-2,3,-1,-3,0),
        (3,334,322,-307,-316,1,0,3,-2,-4,-1,4,0,-3,-2,0,-1),
        (4,336,325,-305,-314,0,-2,2,-1,-4,-1,4,-1,-3,-2,-1,-1),
        (5,339,330,-306,-316,0,-1,-1,-2,-2,-2,3,0,-3,-1,-8,-3,-4,-2,-6,0),
        (6,342,335,-309,-317,1,-1,-3,-3,0,-1,-1,-2,-6,-2,-5,-3,-7,-2,-2,-1),
        (7,344,340,-311,-319,1,0,-3,-3,-3,-3,-1,-2,-7,-3,-5,-3,-5,-3),
        (8,344,345,-310,-318,-2,-3,-2,-4,-3,-2,-4,-4,-6,-4,-5,-3,-3,-2),
        (9,344,351,-312,-322,-1,-2,-3,-3,-2,-3,-6,-6,-6,-5,-4,-3),
        (10,342,354,-312,-319,-1,-4,-3,-5,-2,-2,-7,-8,-6,-5,-2,-3),
        (11,340,356,-312,-319,-2,-4,-2,-2,-2,-5,-7,-9,-5,-4,-2,-4),
        (12,337,357,-312,-319,-1,-2,-1,-3,-3,-3,-7,-11,-3,-4,-4,-5),
        (13,333,357,-313,-319,0,-1,-1,-1,-2,-1,-5,-11,-2,-5,-4,-7),
        (14,328,356,-312,-319,-2,-1,0,2,-1,0,-3,-6,-2,-7,-3,-9),
        (15,319,352,-311,-319,-1,1,0,3,-2,2,-1,-1,-1,-1,-1,-7,-1,-6),
        (16,312,347,-311,-318,0,1,-1,3,-2,1,-1,2,-1,1,-3,1,0,-3,-2,2,0,-4),
        (17,305,341,-311,-318,0,0,-1,3,-1,1,-3,0,1,-1,-2,1,0,0,-3,0,0,1,0,-3,-4,3),
        (18,300,337,-310,-319,0,-1,-1,1,-3,1,1,-1,-3,0,1,-1,1,-2,-2,1,1,-2,1,-1,2,-2),
        (19,297,333,-309,-318,0,-1,-1,0,-2,1,0,0,-1,-1,0,-1,2,-1,-1,0,0,-1,3,-1,0,-2),
        (20,295,330,-310,-318,1,-1,-1,0,-1,0,1,-1,-2,1,2,-2,0,0,1,-1,-2,1,4,-2),
        (21,293,327,-310,-319,2,0,-2,0,-1,-1,2,-1,-1,-1,3,0,-2,0,2,-1,-2,0),
        (22,290,323,-309,-319,2,-1,-2,1,0,-2,3,0,0,-1,0,0,0,0,2,-1),
        (23,288,318,-309,-317,3,-1,-2,-1,0,0,2,-1,2,0,-1,-1,2,1),
        (24,287,314,-310,-317,4,-1,-2,-2,1,1,0,-2,3,1,-1,0),
        (25,287,311,-311,-318,3,-1,0,-1,-1,0,3,-2,1,2,0,-2),
        (26,288,308,-313,-319,3,-1,1,0,0,-3,0,0,5,3),
        (27,289,306,-313,-319,3,-1,0,-2,0,0,1,-1),
        (28,291,304,-313,-319,1,-1,1,-1,0,-1,0,0),
        (29,293,303,-313,-321,1,1,0,-1,0,-1),
        (30,295,301,-313,-319,1,-1,0,1,-1,-1),
        (31,298,300,-313,-319,1,-1,0,1,0,-1),
        (32,301,300,-313,-320,1,1,0,1,0,-1,2,1),
        (33,303,300,-311,-319,0,1,1,1,0,0,0,1),
        (34,306,301,-311,-319,0,1,1,1,-1,0,1,2,1,1),
        (35,311,304,-311,-320,0,1,0,0,0,1,-1,2,1,-1,0,1,-1,1),
        (36,314,305,-310,-318,0,0,0,-1,-1,2,-1,1,1,0,0,-1,-1,2,0,0,0,-1),
        (37,317,308,-309,-319,1,-1,-1,2,-1,0,0,0,-1,0,1,-1,-1,1,0,0),
        (38,321,310,-309,-317,2,-1,-1,0,-2,1,2,-2,-1,1,0,-1,-1,1),
        (39,323,313,-307,-318,1,-1,-1,0,-1,1,2,-3,-1,1,-1,0),
    ),
    (
        (0,322,315,-303,-316,0,-2,1,0,-2,0),
        (1,324,317,-302,-316,-1,-1,2,-1,0,0),
        (2,325,319,-299,-316,-3,0,3,-2,-1,0),
        (3,328,321,-300,-314,-1,-1,2,-1,-2,-2),
        (4,330,324,-298,-313,-3,-2,1,0,-2,-3),
        (5,333,328,-299,-313,-5,-3,3,-1,-5,-1,3,-1),
        (6,337,333,-305,-315,-2,-3,2,1,-5,-4,0,-1,-3,-1),
        (7,340,338,-310,-317,0,-3,1,0,-5,-3,-1,-2,-5,-2,-2,-3,-6,-2,-5,-2),
        (8,341,343,-312,-319,0,-1,0,-3,-4,-3,-3,-3,-3,-2,-5,-4,-4,-2,-3,-2),
        (9,341,348,-314,-321,2,-1,-3,-4,-2,-3,-3,-2,-5,-5,-4,-3,-5,-3,-1,-2),
        (10,339,352,-313,-321,0,-2,-1,-3,-3,-4,-4,-3,-4,-6,-5,-4,-3,-3),
        (11,338,354,-314,-322,0,0,-1,-3,-4,-5,-1,-3,-7,-7,-2,-4,-4,-4),
        (12,336,355,-314,-322,0,1,-1,-4,-3,-3,-3,-4,-4,-7,-3,-4,-4,-5),
        (13,333,356,-316,-323,2,1,-2,-2,-1,0,-3,-6,-2,-5,-4,-7,-3,-6),
        (14,328,354,-313,-321,-1,1,-1,-1,-1,1,-2,-2,-1,-5,-4,-10,-1,-2,-1,-8),
        (15,319,350,-311,-319,-1,1,0,0,-2,2,0,1,-1,0,-2,-4,0,-5,-2,-8),
        (16,312,346,-310,-319,-1,1,-1,-1,-1,5,-1,1,-1,-1,-2,1,0,1,-2,0,0,-4,0,-2),
        (17,305,340,-309,-319,-2,3,1,-2,-2,1,-2,2,1,-2,-2,3,-1,1,0,-2,-1,-1,-1,-1),
        (18,301,336,-310,-320,-1,2,0,-1,-1,-1,-1,0,0,0,-1,-1,-1,0,0,1,0,-3),
        (19,298,333,-309,-320,-1,2,1,-3,-1,2,-2,-1,1,0,0,-1,-1,0,1,0),
        (20,296,329,-309,-318,-1,0,1,-1,0,0,-2,0,2,-1,-1,0,0,1,0,-3),
        (21,294,327,-309,-319,1,0,-1,-1,0,0,0,-1,1,-1,0,0,-2,0),
        (22,292,323,-309,-318,1,-1,-1,-1,1,0,0,0,2,-1,-1,0),
        (23,290,318,-308,-316,-1,-2,1,0,1,0,0,-1,3,0,-1,0),
        (24,289,315,-309,-317,0,-1,1,-1,1,1,0,-2,3,1),
        (25,290,312,-313,-317,2,-2,1,-1,1,0,0,-1),
        (26,291,310,-315,-320,3,-1,-1,-2),
        (27,292,308,-315,-320,1,-2,0,-1),
        (28,294,306,-316,-321,1,0,-1,-2),
        (29,296,305,-316,-322,0,0),
        (30,297,304,-314,-322,-2,-1),
        (31,300,303,-314,-321,-2,-2),
        (32,303,304,-315,-323,0,-1,1,-1),
        (33,305,304,-314,-323,1,1,0,0),
        (34,307,305,-313,-323,1,1,0,0,1,2),
        (35,311,307,-311,-322,0,2,1,-3,-1,3,0,0),
        (36,313,308,-308,-320,-2,-1,1,0,-1,1,0,1,0,-1),
        (37,315,310,-306,-320,0,0,-1,-1,-1,2,0,-2,0,2),
        (38,318,312,-305,-319,0,0,0,-1,-1,1,1,-2),
        (39,320,314,-304,-319,0,0,0,-1,-1,1,2,-2),
    ),
    (
        (0,321,316,-302,-318,0,0),
        (1,321,317,-297,-316,-2,-1),
        (2,324,319,-298,-315,-3,-1),
        (3,326,321,-297,-314,-3,0),
        (4,328,323,-296,-311,-4,-3),
        (5,332,327,-300,-312,-3,-2),
        (6,335,333,-303,-315,-4,-3),
        (7,338,338,-308,-317,-3,-4,0,0),
        (8,339,343,-310,-319,-3,-3,0,-2),
        (9,339,347,-312,-320,-2,-4,-1,-1,-2,-4,-2,-2),
        (10,338,350,-314,-320,0,-3,-2,-2,-2,-4,-2,-2,-4,-4,-3,-4,-4,-4,-2,-3),
        (11,337,353,-315,-323,0,-1,-1,-2,-3,-4,-1,-2,-4,-5,-3,-5,-4,-2),
        (12,335,354,-314,-323,-1,0,0,-2,-4,-5,-1,-1,-3,-5,-3,-5,-3,-4),
        (13,332,354,-314,-321,-1,-2,-1,0,-2,-4,0,0,-4,-6,-2,-7,-2,-1),
        (14,328,353,-312,-320,-3,-1,0,0,-2,-3,-1,0,-2,-4,-1,-4,-2,-5),
        (15,320,350,-313,-321,1,3,-2,-1,0,1,-1,-2,-2,0,0,1,-1,-4),
        (16,312,345,-310,-319,-1,4,0,-5,-1,5,-2,-3,0,3,-2,1,-1,0),
        (17,306,340,-310,-319,-1,3,-1,-4,0,3,0,-2,-2,3,0,0),
        (18,302,336,-311,-320,-1,2,1,-3,-1,0,-1,1),
        (19,299,332,-310,-318,-1,1,1,-2,1,-1,-3,1),
        (20,297,329,-310,-318,-1,0,1,0,2,-3,-2,2),
        (21,295,327,-309,-319,-2,0,2,0,1,-2),
        (22,293,323,-309,-317,-1,-1,1,-1,2,-1),
        (23,291,319,-309,-317,-1,-1,1,0,4,-1),
        (24,291,316,-312,-318,1,0),
        (25,291,313,-314,-319),
        (26,292,310,-316,-319),
        (27,294,309,-319,-322),
        (28,295,308,-319,-324),
        (29,298,306),
        (30,299,306),
        (31,302,305),
        (32,304,305,-317,-325),
        (33,305,305,-314,-323),
        (34,307,306,-314,-325),
        (35,311,308,-310,-323,-1,1),
        (36,313,309,-308,-321,-1,0),
        (37,315,311,-307,-321,1,0),
        (38,317,313,-304,-320,0,0),
        (39,319,314,-303,-318,0,-1),
    ),
)
