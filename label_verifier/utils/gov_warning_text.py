# Header phrase of the government health warning required on alcohol labels.
# Its presence in the normalized OCR text is what the warning check looks for;
# the full statement body is not compared.
GOVERNMENT_WARNING_PHRASE = "government warning"
