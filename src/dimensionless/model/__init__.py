"""
The MODEL layer contains the calculator catalog and the evaluation logic.
It has NO knowledge of the GUI (Qt). It deals with formulas, classification,
bilingual text and result formatting.
"""
