# analyzers - 분석 도구 패키지
