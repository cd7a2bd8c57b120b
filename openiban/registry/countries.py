"""IBAN country definitions.

Source: SWIFT IBAN Registry. Each entry lists the total IBAN length, the BBAN
structure in registry notation and the registry example IBAN.

SEPA membership follows the EPC scheme list: the 27 EU member states, the
EEA states (IS, LI, NO) and AD, CH, GB, MC, SM, VA.
"""

from openiban.registry.models import BbanPattern, IbanCountry

# (code, name, length, BBAN notation, example, SEPA)
COUNTRY_TABLE: tuple[tuple[str, str, int, str, str, bool], ...] = (
    ("AD", "Andorra", 24, "4!n4!n12!c", "AD1200012030200359100100", True),
    ("AE", "United Arab Emirates", 23, "3!n16!n", "AE070331234567890123456", False),
    ("AL", "Albania", 28, "8!n16!c", "AL47212110090000000235698741", False),
    ("AT", "Austria", 20, "5!n11!n", "AT611904300234573201", True),
    ("AZ", "Azerbaijan", 28, "4!a20!c", "AZ21NABZ00000000137010001944", False),
    ("BA", "Bosnia and Herzegovina", 20, "3!n3!n8!n2!n", "BA391290079401028494", False),
    ("BE", "Belgium", 16, "3!n7!n2!n", "BE68539007547034", True),
    ("BG", "Bulgaria", 22, "4!a4!n2!n8!c", "BG80BNBG96611020345678", True),
    ("BH", "Bahrain", 22, "4!a14!c", "BH67BMAG00001299123456", False),
    ("BR", "Brazil", 29, "8!n5!n10!n1!a1!c", "BR1800360305000010009795493C1", False),
    ("BY", "Belarus", 28, "4!c4!n16!c", "BY13NBRB3600900000002Z00AB00", False),
    ("CH", "Switzerland", 21, "5!n12!c", "CH9300762011623852957", True),
    ("CR", "Costa Rica", 22, "4!n14!n", "CR05015202001026284066", False),
    ("CY", "Cyprus", 28, "3!n5!n16!c", "CY17002001280000001200527600", True),
    ("CZ", "Czech Republic", 24, "4!n6!n10!n", "CZ6508000000192000145399", True),
    ("DE", "Germany", 22, "8!n10!n", "DE89370400440532013000", True),
    ("DK", "Denmark", 18, "4!n9!n1!n", "DK5000400440116243", True),
    ("DO", "Dominican Republic", 28, "4!c20!n", "DO28BAGR00000001212453611324", False),
    ("EE", "Estonia", 20, "2!n2!n11!n1!n", "EE382200221020145685", True),
    ("EG", "Egypt", 29, "4!n4!n17!n", "EG380019000500000000263180002", False),
    ("ES", "Spain", 24, "4!n4!n1!n1!n10!n", "ES9121000418450200051332", True),
    ("FI", "Finland", 18, "3!n11!n", "FI2112345600000785", True),
    ("FO", "Faroe Islands", 18, "4!n9!n1!n", "FO6264600001631634", False),
    ("FR", "France", 27, "5!n5!n11!c2!n", "FR1420041010050500013M02606", True),
    ("GB", "United Kingdom", 22, "4!a6!n8!n", "GB29NWBK60161331926819", True),
    ("GE", "Georgia", 22, "2!a16!n", "GE29NB0000000101904917", False),
    ("GI", "Gibraltar", 23, "4!a15!c", "GI75NWBK000000007099453", False),
    ("GL", "Greenland", 18, "4!n9!n1!n", "GL8964710001000206", False),
    ("GR", "Greece", 27, "3!n4!n16!c", "GR1601101250000000012300695", True),
    ("GT", "Guatemala", 28, "4!c20!c", "GT82TRAJ01020000001210029690", False),
    ("HR", "Croatia", 21, "7!n10!n", "HR1210010051863000160", True),
    ("HU", "Hungary", 28, "3!n4!n1!n15!n1!n", "HU42117730161111101800000000", True),
    ("IE", "Ireland", 22, "4!a6!n8!n", "IE29AIBK93115212345678", True),
    ("IL", "Israel", 23, "3!n3!n13!n", "IL620108000000099999999", False),
    ("IQ", "Iraq", 23, "4!a3!n12!n", "IQ98NBIQ850123456789012", False),
    ("IS", "Iceland", 26, "4!n2!n6!n10!n", "IS140159260076545510730339", True),
    ("IT", "Italy", 27, "1!a5!n5!n12!c", "IT60X0542811101000000123456", True),
    ("JO", "Jordan", 30, "4!a4!n18!c", "JO94CBJO0010000000000131000302", False),
    ("KW", "Kuwait", 30, "4!a22!c", "KW81CBKU0000000000001234560101", False),
    ("KZ", "Kazakhstan", 20, "3!n13!c", "KZ86125KZT5004100100", False),
    ("LB", "Lebanon", 28, "4!n20!c", "LB62099900000001001901229114", False),
    ("LC", "Saint Lucia", 32, "4!a24!c", "LC55HEMM000100010012001200023015", False),
    ("LI", "Liechtenstein", 21, "5!n12!c", "LI21088100002324013AA", True),
    ("LT", "Lithuania", 20, "5!n11!n", "LT121000011101001000", True),
    ("LU", "Luxembourg", 20, "3!n13!c", "LU280019400644750000", True),
    ("LV", "Latvia", 21, "4!a13!c", "LV80BANK0000435195001", True),
    ("MC", "Monaco", 27, "5!n5!n11!c2!n", "MC5811222000010123456789030", True),
    ("MD", "Moldova", 24, "2!c18!c", "MD24AG000225100013104168", False),
    ("ME", "Montenegro", 22, "3!n13!n2!n", "ME25505000012345678951", False),
    ("MK", "North Macedonia", 19, "3!n10!c2!n", "MK07250120000058984", False),
    ("MR", "Mauritania", 27, "5!n5!n11!n2!n", "MR1300020001010000123456753", False),
    ("MT", "Malta", 31, "4!a5!n18!c", "MT84MALT011000012345MTLCAST001S", True),
    ("MU", "Mauritius", 30, "4!a2!n2!n12!n3!n3!a", "MU17BOMM0101101030300200000MUR", False),
    ("NL", "Netherlands", 18, "4!a10!n", "NL91ABNA0417164300", True),
    ("NO", "Norway", 15, "4!n6!n1!n", "NO9386011117947", True),
    ("PK", "Pakistan", 24, "4!a16!c", "PK36SCBL0000001123456702", False),
    ("PL", "Poland", 28, "8!n16!n", "PL61109010140000071219812874", True),
    ("PS", "Palestine", 29, "4!a21!c", "PS92PALS000000000400123456702", False),
    ("PT", "Portugal", 25, "4!n4!n11!n2!n", "PT50000201231234567890154", True),
    ("QA", "Qatar", 29, "4!a21!c", "QA58DOHB00001234567890ABCDEFG", False),
    ("RO", "Romania", 24, "4!a16!c", "RO49AAAA1B31007593840000", True),
    ("RS", "Serbia", 22, "3!n13!n2!n", "RS35260005601001611379", False),
    ("SA", "Saudi Arabia", 24, "2!n18!c", "SA0380000000608010167519", False),
    ("SC", "Seychelles", 31, "4!a2!n2!n16!n3!a", "SC18SSCB11010000000000001497USD", False),
    ("SE", "Sweden", 24, "3!n16!n1!n", "SE4550000000058398257466", True),
    ("SI", "Slovenia", 19, "5!n8!n2!n", "SI56263300012039086", True),
    ("SK", "Slovakia", 24, "4!n6!n10!n", "SK3112000000198742637541", True),
    ("SM", "San Marino", 27, "1!a5!n5!n12!c", "SM86U0322509800000000270100", True),
    ("ST", "Sao Tome and Principe", 25, "4!n4!n11!n2!n", "ST68000100010051845310112", False),
    ("SV", "El Salvador", 28, "4!a20!n", "SV62CENR00000000000000700025", False),
    ("TL", "Timor-Leste", 23, "3!n14!n2!n", "TL380080012345678910157", False),
    ("TN", "Tunisia", 24, "2!n3!n13!n2!n", "TN5910006035183598478831", False),
    ("TR", "Turkey", 26, "5!n1!n16!c", "TR330006100519786457841326", False),
    ("UA", "Ukraine", 29, "6!n19!c", "UA213223130000026007233566001", False),
    ("VA", "Vatican City", 22, "3!n15!n", "VA59001123000012345678", True),
    ("VG", "British Virgin Islands", 24, "4!a16!n", "VG96VPVG0000012345678901", False),
    ("XK", "Kosovo", 20, "4!n10!n2!n", "XK051212012345678906", False),
)


def load_countries() -> list[IbanCountry]:
    """Build country definitions from the registry table."""
    return [
        IbanCountry(
            code=code,
            name=name,
            length=length,
            bban_pattern=BbanPattern.parse(notation),
            example=example,
            sepa=sepa,
        )
        for code, name, length, notation, example, sepa in COUNTRY_TABLE
    ]
