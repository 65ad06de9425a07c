"""
Isotope mass and abundance dictionaries.

Each dictionary is keyed by element symbol. Every element maps isotope numbers to ``(atomic mass, natural abundance)``
and holds a ``0`` key with the mass of the principal (most abundant) isotope and an abundance of 1.

Values are taken from the NIST "Atomic Weights and Isotopic Compositions" tables
(https://www.nist.gov/pml/atomic-weights-and-isotopic-compositions-relative-atomic-masses).

Elements without a naturally occurring isotope (e.g. Tc, Pm) are omitted.

Additional dictionaries may be defined here and handed to the calculators through their ``mass_data`` keyword.
"""

nist_mass = {
    'H': {
        0: (1.00782503223, 1.),
        1: (1.00782503223, 0.999885),
        2: (2.01410177812, 0.000115),
        3: (3.0160492779, 0.),
    },
    'He': {
        0: (4.00260325413, 1.),
        3: (3.0160293201, 0.00000134),
        4: (4.00260325413, 0.99999866),
    },
    'Li': {
        0: (7.0160034366, 1.),
        6: (6.0151228874, 0.0759),
        7: (7.0160034366, 0.9241),
    },
    'Be': {
        0: (9.012183065, 1.),
        9: (9.012183065, 1.),
    },
    'B': {
        0: (11.00930536, 1.),
        10: (10.01293695, 0.199),
        11: (11.00930536, 0.801),
    },
    'C': {
        0: (12., 1.),
        12: (12., 0.9893),
        13: (13.00335483507, 0.0107),
        14: (14.0032419884, 0.),
    },
    'N': {
        0: (14.00307400443, 1.),
        14: (14.00307400443, 0.99636),
        15: (15.00010889888, 0.00364),
    },
    'O': {
        0: (15.99491461957, 1.),
        16: (15.99491461957, 0.99757),
        17: (16.9991317565, 0.00038),
        18: (17.99915961286, 0.00205),
    },
    'F': {
        0: (18.99840316273, 1.),
        19: (18.99840316273, 1.),
    },
    'Ne': {
        0: (19.9924401762, 1.),
        20: (19.9924401762, 0.9048),
        21: (20.993846685, 0.0027),
        22: (21.991385114, 0.0925),
    },
    'Na': {
        0: (22.989769282, 1.),
        23: (22.989769282, 1.),
    },
    'Mg': {
        0: (23.985041697, 1.),
        24: (23.985041697, 0.7899),
        25: (24.985836976, 0.1),
        26: (25.982592968, 0.1101),
    },
    'Al': {
        0: (26.98153853, 1.),
        27: (26.98153853, 1.),
    },
    'Si': {
        0: (27.97692653465, 1.),
        28: (27.97692653465, 0.92223),
        29: (28.9764946649, 0.04685),
        30: (29.973770136, 0.03092),
    },
    'P': {
        0: (30.97376199842, 1.),
        31: (30.97376199842, 1.),
    },
    'S': {
        0: (31.9720711744, 1.),
        32: (31.9720711744, 0.9499),
        33: (32.9714589098, 0.0075),
        34: (33.967867004, 0.0425),
        36: (35.96708071, 0.0001),
    },
    'Cl': {
        0: (34.968852682, 1.),
        35: (34.968852682, 0.7576),
        37: (36.965902602, 0.2424),
    },
    'Ar': {
        0: (39.9623831237, 1.),
        36: (35.967545105, 0.003336),
        38: (37.96273211, 0.000629),
        40: (39.9623831237, 0.996035),
    },
    'K': {
        0: (38.9637064864, 1.),
        39: (38.9637064864, 0.932581),
        40: (39.963998166, 0.000117),
        41: (40.9618252579, 0.067302),
    },
    'Ca': {
        0: (39.962590863, 1.),
        40: (39.962590863, 0.96941),
        42: (41.95861783, 0.00647),
        43: (42.95876644, 0.00135),
        44: (43.95548156, 0.02086),
        46: (45.953689, 0.00004),
        48: (47.95252276, 0.00187),
    },
    'Sc': {
        0: (44.95590828, 1.),
        45: (44.95590828, 1.),
    },
    'Ti': {
        0: (47.94794198, 1.),
        46: (45.95262772, 0.0825),
        47: (46.95175879, 0.0744),
        48: (47.94794198, 0.7372),
        49: (48.94786568, 0.0541),
        50: (49.94478689, 0.0518),
    },
    'V': {
        0: (50.94395704, 1.),
        50: (49.94715601, 0.0025),
        51: (50.94395704, 0.9975),
    },
    'Cr': {
        0: (51.94050623, 1.),
        50: (49.94604183, 0.04345),
        52: (51.94050623, 0.83789),
        53: (52.94064815, 0.09501),
        54: (53.93887916, 0.02365),
    },
    'Mn': {
        0: (54.93804391, 1.),
        55: (54.93804391, 1.),
    },
    'Fe': {
        0: (55.93493633, 1.),
        54: (53.93960899, 0.05845),
        56: (55.93493633, 0.91754),
        57: (56.93539284, 0.02119),
        58: (57.93327443, 0.00282),
    },
    'Co': {
        0: (58.93319429, 1.),
        59: (58.93319429, 1.),
    },
    'Ni': {
        0: (57.93534241, 1.),
        58: (57.93534241, 0.68077),
        60: (59.93078588, 0.26223),
        61: (60.93105557, 0.011399),
        62: (61.92834537, 0.036346),
        64: (63.92796682, 0.009255),
    },
    'Cu': {
        0: (62.92959772, 1.),
        63: (62.92959772, 0.6915),
        65: (64.9277897, 0.3085),
    },
    'Zn': {
        0: (63.92914201, 1.),
        64: (63.92914201, 0.4917),
        66: (65.92603381, 0.2773),
        67: (66.92712775, 0.0404),
        68: (67.92484455, 0.1845),
        70: (69.9253192, 0.0061),
    },
    'Ga': {
        0: (68.9255735, 1.),
        69: (68.9255735, 0.60108),
        71: (70.92470258, 0.39892),
    },
    'Ge': {
        0: (73.921177761, 1.),
        70: (69.92424875, 0.2057),
        72: (71.922075826, 0.2745),
        73: (72.923458956, 0.0775),
        74: (73.921177761, 0.365),
        76: (75.921402726, 0.0773),
    },
    'As': {
        0: (74.92159457, 1.),
        75: (74.92159457, 1.),
    },
    'Se': {
        0: (79.9165218, 1.),
        74: (73.922475934, 0.0089),
        76: (75.919213704, 0.0937),
        77: (76.919914154, 0.0763),
        78: (77.91730928, 0.2377),
        80: (79.9165218, 0.4961),
        82: (81.9166995, 0.0873),
    },
    'Br': {
        0: (78.9183376, 1.),
        79: (78.9183376, 0.5069),
        81: (80.9162897, 0.4931),
    },
    'Kr': {
        0: (83.9114977282, 1.),
        78: (77.92036494, 0.00355),
        80: (79.91637808, 0.02286),
        82: (81.91348273, 0.11593),
        83: (82.91412716, 0.115),
        84: (83.9114977282, 0.56987),
        86: (85.9106106269, 0.17279),
    },
    'Rb': {
        0: (84.9117897379, 1.),
        85: (84.9117897379, 0.7217),
        87: (86.909180531, 0.2783),
    },
    'Sr': {
        0: (87.9056125, 1.),
        84: (83.9134191, 0.0056),
        86: (85.9092606, 0.0986),
        87: (86.9088775, 0.07),
        88: (87.9056125, 0.8258),
    },
    'Y': {
        0: (88.9058403, 1.),
        89: (88.9058403, 1.),
    },
    'Zr': {
        0: (89.9046977, 1.),
        90: (89.9046977, 0.5145),
        91: (90.9056396, 0.1122),
        92: (91.9050347, 0.1715),
        94: (93.9063108, 0.1738),
        96: (95.9082714, 0.028),
    },
    'Nb': {
        0: (92.906373, 1.),
        93: (92.906373, 1.),
    },
    'Mo': {
        0: (97.90540482, 1.),
        92: (91.90680796, 0.1453),
        94: (93.9050849, 0.0915),
        95: (94.90583877, 0.1584),
        96: (95.90467612, 0.1667),
        97: (96.90601812, 0.096),
        98: (97.90540482, 0.2439),
        100: (99.9074718, 0.0982),
    },
    'Ru': {
        0: (101.9043441, 1.),
        96: (95.90759025, 0.0554),
        98: (97.9052868, 0.0187),
        99: (98.9059341, 0.1276),
        100: (99.9042143, 0.126),
        101: (100.9055769, 0.1706),
        102: (101.9043441, 0.3155),
        104: (103.9054275, 0.1862),
    },
    'Rh': {
        0: (102.905498, 1.),
        103: (102.905498, 1.),
    },
    'Pd': {
        0: (105.9034804, 1.),
        102: (101.9056022, 0.0102),
        104: (103.9040305, 0.1114),
        105: (104.9050796, 0.2233),
        106: (105.9034804, 0.2733),
        108: (107.9038916, 0.2646),
        110: (109.9051722, 0.1172),
    },
    'Ag': {
        0: (106.9050916, 1.),
        107: (106.9050916, 0.51839),
        109: (108.9047553, 0.48161),
    },
    'Cd': {
        0: (113.90336509, 1.),
        106: (105.9064599, 0.0125),
        108: (107.9041834, 0.0089),
        110: (109.90300661, 0.1249),
        111: (110.90418287, 0.128),
        112: (111.90276287, 0.2413),
        113: (112.90440813, 0.1222),
        114: (113.90336509, 0.2873),
        116: (115.90476315, 0.0749),
    },
    'In': {
        0: (114.903878776, 1.),
        113: (112.90406184, 0.0429),
        115: (114.903878776, 0.9571),
    },
    'Sn': {
        0: (119.90220163, 1.),
        112: (111.90482387, 0.0097),
        114: (113.9027827, 0.0066),
        115: (114.903344699, 0.0034),
        116: (115.9017428, 0.1454),
        117: (116.90295398, 0.0768),
        118: (117.90160657, 0.2422),
        119: (118.90331117, 0.0859),
        120: (119.90220163, 0.3258),
        122: (121.9034438, 0.0463),
        124: (123.9052766, 0.0579),
    },
    'Sb': {
        0: (120.903812, 1.),
        121: (120.903812, 0.5721),
        123: (122.9042132, 0.4279),
    },
    'Te': {
        0: (129.906222748, 1.),
        120: (119.9040593, 0.0009),
        122: (121.9030435, 0.0255),
        123: (122.9042698, 0.0089),
        124: (123.9028171, 0.0474),
        125: (124.9044299, 0.0707),
        126: (125.9033109, 0.1884),
        128: (127.90446128, 0.3174),
        130: (129.906222748, 0.3408),
    },
    'I': {
        0: (126.9044719, 1.),
        127: (126.9044719, 1.),
    },
    'Xe': {
        0: (131.9041550856, 1.),
        124: (123.905892, 0.000952),
        126: (125.9042983, 0.00089),
        128: (127.903531, 0.019102),
        129: (128.9047808611, 0.264006),
        130: (129.903509349, 0.04071),
        131: (130.90508406, 0.212324),
        132: (131.9041550856, 0.269086),
        134: (133.90539466, 0.104357),
        136: (135.907214484, 0.088573),
    },
    'Cs': {
        0: (132.905451961, 1.),
        133: (132.905451961, 1.),
    },
    'Ba': {
        0: (137.905247, 1.),
        130: (129.9063207, 0.00106),
        132: (131.9050611, 0.00101),
        134: (133.90450818, 0.02417),
        135: (134.90568838, 0.06592),
        136: (135.90457573, 0.07854),
        137: (136.90582714, 0.11232),
        138: (137.905247, 0.71698),
    },
    'La': {
        0: (138.9063563, 1.),
        138: (137.9071149, 0.0008881),
        139: (138.9063563, 0.9991119),
    },
    'Ce': {
        0: (139.9054431, 1.),
        136: (135.90712921, 0.00185),
        138: (137.905991, 0.00251),
        140: (139.9054431, 0.8845),
        142: (141.9092504, 0.11114),
    },
    'Pr': {
        0: (140.9076576, 1.),
        141: (140.9076576, 1.),
    },
    'Nd': {
        0: (141.907729, 1.),
        142: (141.907729, 0.27152),
        143: (142.90982, 0.12174),
        144: (143.910093, 0.23798),
        145: (144.9125793, 0.08293),
        146: (145.9131226, 0.17189),
        148: (147.9168993, 0.05756),
        150: (149.9209022, 0.05638),
    },
    'Sm': {
        0: (151.9197397, 1.),
        144: (143.9120065, 0.0307),
        147: (146.9149044, 0.1499),
        148: (147.9148292, 0.1124),
        149: (148.9171921, 0.1382),
        150: (149.9172829, 0.0738),
        152: (151.9197397, 0.2675),
        154: (153.9222169, 0.2275),
    },
    'Eu': {
        0: (152.921238, 1.),
        151: (150.9198578, 0.4781),
        153: (152.921238, 0.5219),
    },
    'Gd': {
        0: (157.9241123, 1.),
        152: (151.9197995, 0.002),
        154: (153.9208741, 0.0218),
        155: (154.9226305, 0.148),
        156: (155.9221312, 0.2047),
        157: (156.9239686, 0.1565),
        158: (157.9241123, 0.2484),
        160: (159.9270624, 0.2186),
    },
    'Tb': {
        0: (158.9253547, 1.),
        159: (158.9253547, 1.),
    },
    'Dy': {
        0: (163.9291819, 1.),
        156: (155.9242847, 0.00056),
        158: (157.9244159, 0.00095),
        160: (159.9252046, 0.02329),
        161: (160.9269405, 0.18889),
        162: (161.9268056, 0.25475),
        163: (162.9287383, 0.24896),
        164: (163.9291819, 0.2826),
    },
    'Ho': {
        0: (164.9303288, 1.),
        165: (164.9303288, 1.),
    },
    'Er': {
        0: (165.9302995, 1.),
        162: (161.9287884, 0.00139),
        164: (163.9292088, 0.01601),
        166: (165.9302995, 0.33503),
        167: (166.9320546, 0.22869),
        168: (167.9323767, 0.26978),
        170: (169.9354702, 0.1491),
    },
    'Tm': {
        0: (168.9342179, 1.),
        169: (168.9342179, 1.),
    },
    'Yb': {
        0: (173.9388664, 1.),
        168: (167.9338896, 0.00123),
        170: (169.9347664, 0.02982),
        171: (170.9363302, 0.1409),
        172: (171.9363859, 0.2168),
        173: (172.9382151, 0.16103),
        174: (173.9388664, 0.32026),
        176: (175.9425764, 0.12996),
    },
    'Lu': {
        0: (174.9407752, 1.),
        175: (174.9407752, 0.97401),
        176: (175.9426897, 0.02599),
    },
    'Hf': {
        0: (179.946557, 1.),
        174: (173.9400461, 0.0016),
        176: (175.9414076, 0.0526),
        177: (176.9432277, 0.186),
        178: (177.9437058, 0.2728),
        179: (178.9458232, 0.1362),
        180: (179.946557, 0.3508),
    },
    'Ta': {
        0: (180.9479958, 1.),
        180: (179.9474648, 0.0001201),
        181: (180.9479958, 0.9998799),
    },
    'W': {
        0: (183.95093092, 1.),
        180: (179.9467108, 0.0012),
        182: (181.94820394, 0.265),
        183: (182.95022275, 0.1431),
        184: (183.95093092, 0.3064),
        186: (185.9543628, 0.2843),
    },
    'Re': {
        0: (186.9557501, 1.),
        185: (184.9529545, 0.374),
        187: (186.9557501, 0.626),
    },
    'Os': {
        0: (191.961477, 1.),
        184: (183.9524885, 0.0002),
        186: (185.953835, 0.0159),
        187: (186.9557474, 0.0196),
        188: (187.9558352, 0.1324),
        189: (188.9581442, 0.1615),
        190: (189.9584437, 0.2626),
        192: (191.961477, 0.4078),
    },
    'Ir': {
        0: (192.9629216, 1.),
        191: (190.9605893, 0.373),
        193: (192.9629216, 0.627),
    },
    'Pt': {
        0: (194.9647917, 1.),
        190: (189.9599297, 0.00012),
        192: (191.9610387, 0.00782),
        194: (193.9626809, 0.3286),
        195: (194.9647917, 0.3378),
        196: (195.96495209, 0.2521),
        198: (197.9678949, 0.07356),
    },
    'Au': {
        0: (196.96656879, 1.),
        197: (196.96656879, 1.),
    },
    'Hg': {
        0: (201.9706434, 1.),
        196: (195.9658326, 0.0015),
        198: (197.9667686, 0.0997),
        199: (198.96828064, 0.1687),
        200: (199.96832659, 0.231),
        201: (200.97030284, 0.1318),
        202: (201.9706434, 0.2986),
        204: (203.97349398, 0.0687),
    },
    'Tl': {
        0: (204.9744278, 1.),
        203: (202.9723446, 0.2952),
        205: (204.9744278, 0.7048),
    },
    'Pb': {
        0: (207.9766525, 1.),
        204: (203.973044, 0.014),
        206: (205.9744657, 0.241),
        207: (206.9758973, 0.221),
        208: (207.9766525, 0.524),
    },
    'Bi': {
        0: (208.9803991, 1.),
        209: (208.9803991, 1.),
    },
    'Th': {
        0: (232.0380558, 1.),
        232: (232.0380558, 1.),
    },
    'Pa': {
        0: (231.0358842, 1.),
        231: (231.0358842, 1.),
    },
    'U': {
        0: (238.0507884, 1.),
        233: (233.0396355, 0.),
        234: (234.0409523, 0.000054),
        235: (235.0439301, 0.007204),
        236: (236.0455682, 0.),
        238: (238.0507884, 0.992742),
    },
}
