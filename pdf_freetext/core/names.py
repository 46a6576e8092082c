from PyPDF2.generic import NameObject

# --- Dictionary keys ---
TYPE = NameObject("/Type")
SUBTYPE = NameObject("/Subtype")
RECT = NameObject("/Rect")
CONTENTS = NameObject("/Contents")
NM = NameObject("/NM")
M = NameObject("/M")
F = NameObject("/F")
C = NameObject("/C")
AP = NameObject("/AP")
AS = NameObject("/AS")
N = NameObject("/N")

# Markup
T = NameObject("/T")
CA = NameObject("/CA")
RC = NameObject("/RC")
CREATION_DATE = NameObject("/CreationDate")
SUBJ = NameObject("/Subj")
IT = NameObject("/IT")
BS = NameObject("/BS")
W = NameObject("/W")

# Free text
DA = NameObject("/DA")
DS = NameObject("/DS")
Q = NameObject("/Q")
CL = NameObject("/CL")
LE = NameObject("/LE")
RD = NameObject("/RD")

# Form XObjects
BBOX = NameObject("/BBox")
RESOURCES = NameObject("/Resources")
FONT = NameObject("/Font")
BASE_FONT = NameObject("/BaseFont")
ENCODING = NameObject("/Encoding")
PAGE_ANNOTS = NameObject("/Annots")

# --- Values (without the leading slash) ---
ANNOT = "Annot"
XOBJECT = "XObject"
FORM = "Form"
TYPE1 = "Type1"
HELVETICA = "Helvetica"
WIN_ANSI = "WinAnsiEncoding"
