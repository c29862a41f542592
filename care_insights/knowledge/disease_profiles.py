"""
Default disease knowledge base and symptom synonym table.

Keyword lists are curated lay phrasings matched lexically against patient
input. Declaration order is significant: it breaks confidence ties.
"""

DISEASE_PROFILES = [
    # ===== RESPIRATORY =====
    {
        "name": "Common Cold",
        "keywords": ["runny nose", "sore throat", "cough", "sneezing", "mild fever", "congestion"],
        "severity_tier": "low",
        "specialist": "General Physician",
        "tests": ["Physical Examination"],
        "actions": ["Rest", "Hydration", "OTC medications", "Monitor symptoms"],
    },
    {
        "name": "Influenza (Flu)",
        "keywords": ["high fever", "body aches", "fatigue", "cough", "sore throat", "headache", "chills"],
        "severity_tier": "medium",
        "specialist": "General Physician",
        "tests": ["Rapid Flu Test", "Complete Blood Count"],
        "actions": ["Antiviral medication", "Rest", "Hydration", "Fever management"],
    },
    {
        "name": "Viral Fever",
        "keywords": ["fever", "body aches", "fatigue", "headache", "chills", "loss of appetite"],
        "severity_tier": "low",
        "specialist": "General Physician",
        "tests": ["Complete Blood Count", "Malaria Parasite Test"],
        "actions": ["Rest", "Hydration", "Paracetamol for fever", "Review if fever lasts over 3 days"],
    },
    {
        "name": "Pneumonia",
        "keywords": [
            "productive cough", "fever", "chest pain", "difficulty breathing", "rapid breathing",
            "chills", "fatigue", "phlegm", "sweating", "confusion",
        ],
        "severity_tier": "high",
        "specialist": "Pulmonologist",
        "tests": ["Chest X-Ray", "Blood Tests", "Sputum Culture"],
        "actions": ["Immediate medical attention", "Antibiotics", "Hospitalization may be needed"],
    },
    {
        "name": "Asthma Attack",
        "keywords": ["shortness of breath", "wheezing", "chest tightness", "cough"],
        "severity_tier": "high",
        "specialist": "Pulmonologist",
        "tests": ["Peak Flow Test", "Spirometry"],
        "actions": ["Use rescue inhaler", "Seek immediate care if severe", "Avoid triggers"],
    },

    # ===== CARDIAC =====
    {
        "name": "Heart Attack",
        "keywords": ["chest pain", "shortness of breath", "arm pain", "jaw pain", "nausea", "sweating", "dizziness"],
        "severity_tier": "critical",
        "specialist": "Cardiologist",
        "tests": ["ECG", "Cardiac Enzymes", "Coronary Angiography"],
        "actions": ["CALL EMERGENCY IMMEDIATELY", "Chew aspirin if not allergic", "Do not drive yourself"],
    },
    {
        "name": "Hypertension",
        "keywords": ["headache", "dizziness", "blurred vision", "chest pain", "nosebleeds"],
        "severity_tier": "medium",
        "specialist": "Cardiologist",
        "tests": ["Blood Pressure Monitoring", "ECG", "Lipid Profile"],
        "actions": ["Regular BP monitoring", "Lifestyle changes", "Medication compliance"],
    },

    # ===== GASTROINTESTINAL =====
    {
        "name": "Gastroenteritis",
        "keywords": ["diarrhea", "vomiting", "abdominal pain", "nausea", "fever", "dehydration"],
        "severity_tier": "medium",
        "specialist": "Gastroenterologist",
        "tests": ["Stool Test", "Blood Tests"],
        "actions": ["Hydration", "Electrolyte replacement", "Bland diet", "Rest"],
    },
    {
        "name": "Appendicitis",
        "keywords": ["abdominal pain", "nausea", "vomiting", "fever", "loss of appetite"],
        "severity_tier": "high",
        "specialist": "Surgeon",
        "tests": ["Ultrasound", "CT Scan", "Blood Tests"],
        "actions": ["Immediate medical attention", "Do not eat or drink", "Possible surgery"],
    },
    {
        "name": "GERD",
        "keywords": ["heartburn", "acid reflux", "chest pain", "difficulty swallowing", "chronic cough"],
        "severity_tier": "low",
        "specialist": "Gastroenterologist",
        "tests": ["Endoscopy", "pH Monitoring"],
        "actions": ["Avoid trigger foods", "Smaller meals", "Antacids", "Elevate head while sleeping"],
    },

    # ===== NEUROLOGICAL =====
    {
        "name": "Migraine",
        "keywords": ["severe headache", "nausea", "sensitivity to light", "sensitivity to sound", "visual disturbances"],
        "severity_tier": "medium",
        "specialist": "Neurologist",
        "tests": ["MRI", "CT Scan"],
        "actions": ["Dark quiet room", "Pain medication", "Identify triggers", "Preventive medication"],
    },
    {
        "name": "Stroke",
        "keywords": ["facial drooping", "arm weakness", "speech difficulty", "confusion", "severe headache", "vision problems"],
        "severity_tier": "critical",
        "specialist": "Neurologist",
        "tests": ["CT Scan", "MRI", "Carotid Ultrasound"],
        "actions": ["CALL EMERGENCY IMMEDIATELY", "Note time of symptom onset", "Do not give food or water"],
    },

    # ===== INFECTIONS =====
    {
        "name": "Urinary Tract Infection",
        "keywords": ["painful urination", "frequent urination", "cloudy urine", "pelvic pain", "fever", "blood in urine"],
        "severity_tier": "medium",
        "specialist": "Urologist",
        "tests": ["Urinalysis", "Urine Culture"],
        "actions": ["Antibiotics", "Increased hydration", "Cranberry juice", "Complete medication course"],
    },
    {
        "name": "COVID-19",
        "keywords": ["fever", "dry cough", "fatigue", "loss of taste", "loss of smell", "difficulty breathing", "body aches"],
        "severity_tier": "medium",
        "specialist": "General Physician",
        "tests": ["RT-PCR Test", "Rapid Antigen Test", "Chest CT"],
        "actions": ["Self-isolate", "Monitor oxygen levels", "Hydration", "Seek care if breathing worsens"],
    },
    {
        "name": "Dengue Fever",
        "keywords": ["high fever", "severe headache", "pain behind eyes", "joint pain", "muscle pain", "rash", "bleeding"],
        "severity_tier": "high",
        "specialist": "Infectious Disease Specialist",
        "tests": ["NS1 Antigen Test", "Complete Blood Count", "Platelet Count"],
        "actions": ["Hospitalization may be needed", "Hydration", "Platelet monitoring", "Avoid aspirin"],
    },

    # ===== DERMATOLOGICAL =====
    {
        "name": "Eczema",
        "keywords": ["itchy skin", "dry skin", "rash", "red patches", "skin inflammation"],
        "severity_tier": "low",
        "specialist": "Dermatologist",
        "tests": ["Skin Patch Test", "Physical Examination"],
        "actions": ["Moisturizers", "Avoid triggers", "Topical steroids", "Keep skin hydrated"],
    },

    # ===== ENDOCRINE =====
    {
        "name": "Diabetes",
        "keywords": ["increased thirst", "frequent urination", "fatigue", "blurred vision", "slow healing", "weight loss"],
        "severity_tier": "medium",
        "specialist": "Endocrinologist",
        "tests": ["Fasting Blood Sugar", "HbA1c", "Oral Glucose Tolerance Test"],
        "actions": ["Blood sugar monitoring", "Diet control", "Exercise", "Medication compliance"],
    },
    {
        "name": "Hyperthyroidism",
        "keywords": ["weight loss", "rapid heartbeat", "sweating", "nervousness", "tremors", "fatigue"],
        "severity_tier": "medium",
        "specialist": "Endocrinologist",
        "tests": ["Thyroid Function Tests", "TSH", "T3/T4 levels"],
        "actions": ["Medication", "Regular monitoring", "Avoid caffeine", "Stress management"],
    },
    {
        "name": "Hypothyroidism",
        "keywords": ["fatigue", "weight gain", "cold sensitivity", "dry skin", "constipation", "depression", "muscle weakness"],
        "severity_tier": "medium",
        "specialist": "Endocrinologist",
        "tests": ["Thyroid Function Tests", "TSH", "T3/T4 levels"],
        "actions": ["Thyroid hormone replacement", "Regular monitoring", "Balanced diet"],
    },

    # ===== MUSCULOSKELETAL =====
    {
        "name": "Arthritis",
        "keywords": ["joint pain", "stiffness", "swelling", "reduced range of motion", "redness"],
        "severity_tier": "medium",
        "specialist": "Rheumatologist",
        "tests": ["X-Ray", "MRI", "Blood Tests", "Joint Fluid Analysis"],
        "actions": ["Pain management", "Physical therapy", "Anti-inflammatory medication", "Joint protection"],
    },
    {
        "name": "Osteoporosis",
        "keywords": ["back pain", "loss of height", "stooped posture", "bone fractures"],
        "severity_tier": "medium",
        "specialist": "Orthopedist",
        "tests": ["Bone Density Scan", "X-Ray", "Blood Tests"],
        "actions": ["Calcium and Vitamin D supplements", "Weight-bearing exercises", "Fall prevention", "Medication"],
    },
    {
        "name": "Fibromyalgia",
        "keywords": ["widespread pain", "fatigue", "sleep problems", "cognitive difficulties", "headache"],
        "severity_tier": "medium",
        "specialist": "Rheumatologist",
        "tests": ["Physical Examination", "Blood Tests", "Sleep Study"],
        "actions": ["Pain management", "Sleep improvement", "Stress reduction", "Exercise therapy"],
    },

    # ===== MENTAL HEALTH =====
    {
        "name": "Anxiety Disorder",
        "keywords": [
            "excessive worry", "restlessness", "fatigue", "difficulty concentrating",
            "irritability", "muscle tension", "sleep problems",
        ],
        "severity_tier": "medium",
        "specialist": "Psychiatrist",
        "tests": ["Psychological Evaluation", "Anxiety Screening Tests"],
        "actions": ["Therapy", "Medication if needed", "Stress management", "Relaxation techniques"],
    },
    {
        "name": "Depression",
        "keywords": [
            "persistent sadness", "loss of interest", "fatigue", "sleep changes", "appetite changes",
            "difficulty concentrating", "feelings of worthlessness",
        ],
        "severity_tier": "medium",
        "specialist": "Psychiatrist",
        "tests": ["Depression Screening", "Psychological Evaluation"],
        "actions": ["Therapy", "Antidepressants if needed", "Exercise", "Social support", "Sleep hygiene"],
    },

    # ===== ALLERGIES =====
    {
        "name": "Seasonal Allergies",
        "keywords": ["sneezing", "runny nose", "itchy eyes", "nasal congestion", "watery eyes", "post-nasal drip"],
        "severity_tier": "low",
        "specialist": "Allergist",
        "tests": ["Skin Prick Test", "Blood Test for Allergens"],
        "actions": ["Antihistamines", "Nasal sprays", "Avoid allergens", "Air filtration"],
    },
    {
        "name": "Food Allergy",
        "keywords": ["hives", "itching", "swelling", "nausea", "vomiting", "diarrhea", "difficulty breathing"],
        "severity_tier": "high",
        "specialist": "Allergist",
        "tests": ["Skin Prick Test", "Blood Tests", "Oral Food Challenge"],
        "actions": ["Avoid trigger foods", "Carry epinephrine", "Read food labels", "Emergency action plan"],
    },

    # ===== EYE =====
    {
        "name": "Conjunctivitis",
        "keywords": ["red eyes", "itchy eyes", "watery eyes", "discharge", "gritty feeling", "swollen eyelids"],
        "severity_tier": "low",
        "specialist": "Ophthalmologist",
        "tests": ["Eye Examination", "Swab Test if bacterial"],
        "actions": ["Antibiotic drops if bacterial", "Cold compress", "Avoid touching eyes", "Frequent hand washing"],
    },
    {
        "name": "Glaucoma",
        "keywords": ["blurred vision", "eye pain", "headache", "halos around lights", "vision loss"],
        "severity_tier": "high",
        "specialist": "Ophthalmologist",
        "tests": ["Eye Pressure Test", "Visual Field Test", "Optic Nerve Examination"],
        "actions": ["Eye drops", "Laser treatment", "Surgery if needed", "Regular monitoring"],
    },

    # ===== KIDNEY =====
    {
        "name": "Kidney Stones",
        "keywords": ["severe pain", "blood in urine", "nausea", "vomiting", "frequent urination", "painful urination", "fever"],
        "severity_tier": "high",
        "specialist": "Urologist",
        "tests": ["CT Scan", "Ultrasound", "Urinalysis", "Blood Tests"],
        "actions": ["Pain management", "Increased hydration", "Medical or surgical stone removal", "Dietary changes"],
    },
    {
        "name": "Chronic Kidney Disease",
        "keywords": [
            "fatigue", "swelling", "changes in urination", "nausea", "loss of appetite",
            "sleep problems", "muscle cramps",
        ],
        "severity_tier": "high",
        "specialist": "Nephrologist",
        "tests": ["Blood Tests", "Urine Tests", "Kidney Ultrasound", "Kidney Biopsy"],
        "actions": ["Control blood pressure", "Manage diabetes", "Diet modification", "Medication", "Dialysis if advanced"],
    },

    # ===== LIVER =====
    {
        "name": "Hepatitis",
        "keywords": ["fatigue", "jaundice", "abdominal pain", "loss of appetite", "nausea", "dark urine", "pale stool"],
        "severity_tier": "high",
        "specialist": "Gastroenterologist",
        "tests": ["Liver Function Tests", "Hepatitis Viral Markers", "Ultrasound", "Liver Biopsy"],
        "actions": ["Rest", "Avoid alcohol", "Antiviral medication", "Vaccination", "Regular monitoring"],
    },
    {
        "name": "Fatty Liver Disease",
        "keywords": ["fatigue", "abdominal discomfort", "weight loss", "weakness"],
        "severity_tier": "medium",
        "specialist": "Gastroenterologist",
        "tests": ["Liver Function Tests", "Ultrasound", "CT Scan", "Liver Biopsy"],
        "actions": ["Weight loss", "Exercise", "Avoid alcohol", "Control diabetes", "Healthy diet"],
    },

    # ===== BLOOD =====
    {
        "name": "Anemia",
        "keywords": ["fatigue", "weakness", "pale skin", "shortness of breath", "dizziness", "cold hands", "headache"],
        "severity_tier": "medium",
        "specialist": "Hematologist",
        "tests": ["Complete Blood Count", "Iron Studies", "Vitamin B12 and Folate Levels"],
        "actions": ["Iron supplements", "Vitamin supplements", "Diet modification", "Treat underlying cause"],
    },
    {
        "name": "Leukemia",
        "keywords": [
            "fatigue", "frequent infections", "easy bruising", "bleeding", "weight loss",
            "swollen lymph nodes", "fever", "night sweats",
        ],
        "severity_tier": "critical",
        "specialist": "Oncologist",
        "tests": ["Complete Blood Count", "Bone Marrow Biopsy", "Genetic Tests"],
        "actions": ["Immediate specialist referral", "Chemotherapy", "Radiation", "Stem cell transplant"],
    },

    # ===== AUTOIMMUNE =====
    {
        "name": "Lupus",
        "keywords": ["fatigue", "joint pain", "rash", "fever", "kidney problems", "chest pain", "hair loss"],
        "severity_tier": "high",
        "specialist": "Rheumatologist",
        "tests": ["ANA Test", "Anti-dsDNA", "Complete Blood Count", "Kidney Function Tests"],
        "actions": ["Immunosuppressants", "Anti-inflammatory drugs", "Sun protection", "Regular monitoring"],
    },
    {
        "name": "Multiple Sclerosis",
        "keywords": ["numbness", "tingling", "weakness", "vision problems", "balance problems", "fatigue", "dizziness"],
        "severity_tier": "high",
        "specialist": "Neurologist",
        "tests": ["MRI", "Lumbar Puncture", "Evoked Potential Tests"],
        "actions": ["Disease-modifying therapy", "Physical therapy", "Symptom management", "Lifestyle adjustments"],
    },

    # ===== OTHER COMMON CONDITIONS =====
    {
        "name": "Bronchitis",
        "keywords": ["cough", "mucus production", "fatigue", "shortness of breath", "chest discomfort", "mild fever"],
        "severity_tier": "medium",
        "specialist": "Pulmonologist",
        "tests": ["Chest X-Ray", "Pulmonary Function Tests", "Sputum Culture"],
        "actions": ["Rest", "Fluids", "Humidifier", "Avoid irritants", "Bronchodilators if needed"],
    },
    {
        "name": "Sinusitis",
        "keywords": [
            "facial pain", "nasal congestion", "thick nasal discharge", "reduced sense of smell",
            "headache", "cough",
        ],
        "severity_tier": "low",
        "specialist": "ENT Specialist",
        "tests": ["Physical Examination", "CT Scan", "Nasal Endoscopy"],
        "actions": ["Nasal irrigation", "Decongestants", "Antibiotics if bacterial", "Steam inhalation"],
    },
    {
        "name": "Insomnia",
        "keywords": [
            "difficulty falling asleep", "difficulty staying asleep", "waking too early",
            "daytime fatigue", "irritability",
        ],
        "severity_tier": "low",
        "specialist": "Sleep Specialist",
        "tests": ["Sleep Study", "Sleep Diary", "Psychological Evaluation"],
        "actions": ["Sleep hygiene", "Cognitive behavioral therapy", "Relaxation techniques", "Medication if needed"],
    },
    {
        "name": "Vertigo",
        "keywords": [
            "spinning sensation", "dizziness", "balance problems", "nausea", "vomiting",
            "abnormal eye movements",
        ],
        "severity_tier": "medium",
        "specialist": "ENT Specialist",
        "tests": ["Vestibular Tests", "MRI", "Hearing Test"],
        "actions": ["Vestibular rehabilitation", "Medication", "Canalith repositioning", "Balance exercises"],
    },
]

# Canonical phrase -> alternate lay phrasings.
# Entries are specific phrases only; a bare generic word such as "pain"
# would relate to every "<site> pain" keyword and over-match.
SYMPTOM_SYNONYMS = {
    "fever": ["high temperature", "pyrexia", "febrile", "feverish", "burning up"],
    "headache": ["head pain", "migraine", "cephalalgia", "head hurts"],
    "fatigue": ["tiredness", "exhaustion", "weakness", "lethargy", "low energy"],
    "nausea": ["sick feeling", "queasiness", "upset stomach"],
    "dizziness": ["lightheadedness", "vertigo", "spinning", "unsteady"],
    "difficulty breathing": ["shortness of breath", "breathlessness", "dyspnea"],
    "cough": ["coughing", "hacking"],
    "vomiting": ["throwing up", "being sick", "emesis"],
    "diarrhea": ["loose stools", "watery stool"],
    "rash": ["skin eruption", "hives", "skin redness"],
    "joint pain": ["arthralgia", "joint ache", "aching joints"],
    "abdominal pain": ["stomach pain", "belly pain", "stomach ache", "tummy ache"],
    "chest pain": ["chest discomfort", "chest pressure"],
    "blurred vision": ["vision problems", "unclear vision", "foggy vision"],
    "body aches": ["body pain", "myalgia", "aching all over"],
    "muscle pain": ["muscle ache", "sore muscles", "myalgia"],
    "sore throat": ["throat pain", "scratchy throat", "painful swallowing"],
    "runny nose": ["nasal discharge", "rhinorrhea"],
    "nasal congestion": ["stuffy nose", "blocked nose"],
    "frequent urination": ["urinating often", "polyuria"],
    "painful urination": ["burning urination", "dysuria"],
    "sleep problems": ["insomnia", "trouble sleeping", "sleeplessness"],
    "itchy skin": ["pruritus", "itching"],
    "rapid heartbeat": ["palpitations", "racing heart", "heart pounding"],
}
